"""Settings loader for the Wave Link CLI."""

import logging
from pathlib import Path

from pydantic import ValidationError

from wavelink_cli.config.defaults import DefaultConfigSource
from wavelink_cli.config.models import Settings
from wavelink_cli.config.protocols import ConfigSource
from wavelink_cli.config.resolver import ConfigResolver
from wavelink_cli.config.yaml_source import YAMLConfigSource
from wavelink_cli.exceptions import ConfigValidationError, YAMLConfigError

logger = logging.getLogger(__name__)


class ConfigLoader:
    """Validate raw configuration data from a source into :class:`Settings`."""

    def __init__(self, source: ConfigSource) -> None:
        self._source = source

    @classmethod
    def from_yaml(cls, config_path: Path) -> "ConfigLoader":
        return cls(YAMLConfigSource(config_path))

    def load(self) -> Settings:
        """Return validated settings.

        Raises:
            ConfigValidationError: If a setting has the wrong type or is out of range
        """
        connection, _schema_version = self._source.load()
        logger.debug("Loading settings from %s", self._source.source_description)
        try:
            return Settings.model_validate(connection)
        except ValidationError as e:
            details = "; ".join(
                f"{'.'.join(str(part) for part in err['loc']) or 'connection'}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigValidationError(
                f"Invalid configuration in {self._source.source_description}: {details}",
                errors=e,
            ) from e


def load_settings(explicit_path: Path | None = None) -> Settings:
    """Resolve the configuration file and return validated settings.

    Raises:
        YAMLConfigError: If an explicit path does not exist or cannot be parsed
        ConfigValidationError: If the settings are invalid
    """
    try:
        config_path = ConfigResolver(explicit_path).resolve()
    except FileNotFoundError as e:
        raise YAMLConfigError(str(e)) from e

    if config_path is None:
        return ConfigLoader(DefaultConfigSource()).load()
    return ConfigLoader.from_yaml(config_path).load()
