"""Exception hierarchy for the Wave Link CLI."""
from wavelink_cli.exceptions.base import WaveLinkCliError, ConfigError
from wavelink_cli.exceptions.config import ConfigValidationError, YAMLConfigError
from wavelink_cli.exceptions.validation import InvalidPercentError
from wavelink_cli.exceptions.resolution import EntityNotFoundError, ChannelNotInMixError
from wavelink_cli.exceptions.client import (
    WaveLinkConnectionError,
    WaveLinkRpcError,
    RequestTimeoutError,
)

__all__ = [
    "WaveLinkCliError",
    "ConfigError",
    "ConfigValidationError",
    "YAMLConfigError",
    "InvalidPercentError",
    "EntityNotFoundError",
    "ChannelNotInMixError",
    "WaveLinkConnectionError",
    "WaveLinkRpcError",
    "RequestTimeoutError",
]
