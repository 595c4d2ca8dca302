"""Protocol definitions for configuration sources."""

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConfigSource(Protocol):
    """Protocol for configuration data sources.

    The settings loader depends on this abstraction rather than on a concrete
    file format.

    Implementations include:
    - YAMLConfigSource: Load from YAML files
    - DefaultConfigSource: Built-in defaults
    """

    def load(self) -> tuple[dict[str, Any], int]:
        """Load configuration data from the source.

        Returns:
            Tuple of (connection_data, schema_version) where:
            - connection_data: Raw connection settings dictionary
            - schema_version: Schema version number (1 for built-in defaults)

        Raises:
            ConfigError: If configuration cannot be loaded or is invalid
        """
        ...

    @property
    def source_description(self) -> str:
        """Human-readable description of the config source.

        Returns:
            Description string for logging/error messages
            e.g., "YAML file: /path/to/config.yaml" or "built-in defaults"
        """
        ...


# Current supported schema version
CURRENT_SCHEMA_VERSION = 1
