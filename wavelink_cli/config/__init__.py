"""Configuration package for the Wave Link CLI."""

from wavelink_cli.config.models import Settings
from wavelink_cli.config.loader import ConfigLoader, load_settings
from wavelink_cli.config.resolver import ConfigResolver, DEFAULT_CONFIG_NAMES
from wavelink_cli.config.yaml_source import YAMLConfigSource
from wavelink_cli.config.defaults import DefaultConfigSource

__all__ = [
    "Settings",
    "ConfigLoader",
    "load_settings",
    "ConfigResolver",
    "DEFAULT_CONFIG_NAMES",
    "YAMLConfigSource",
    "DefaultConfigSource",
]
