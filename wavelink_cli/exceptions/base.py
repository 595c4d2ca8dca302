"""Base exception classes for the Wave Link CLI."""


class WaveLinkCliError(Exception):
    """Base class for user-facing errors.

    Every failure the CLI reports derives from this class so the command
    boundary can print it as a single ``Error:`` line and exit non-zero.
    """


class ConfigError(WaveLinkCliError):
    """Base class for configuration errors."""
