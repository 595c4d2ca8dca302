"""Configuration-related exceptions for the Wave Link CLI."""

from pydantic import ValidationError

from wavelink_cli.exceptions.base import ConfigError


class ConfigValidationError(ConfigError):
    """Raised when Pydantic validation fails for user settings.

    This exception is raised when values in the configuration file have the
    wrong type or violate a constraint declared on the settings model.
    """

    def __init__(self, message: str, *, errors: ValidationError | None = None) -> None:
        super().__init__(message)
        self.errors = errors


class YAMLConfigError(ConfigValidationError):
    """Exception raised for YAML configuration file errors.

    This includes:
    - File not found
    - YAML parsing errors
    - Invalid structure (wrong section types)
    - Unsupported schema version
    """
    pass
