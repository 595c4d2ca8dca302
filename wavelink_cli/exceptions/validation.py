"""Argument validation exceptions for the Wave Link CLI."""

from wavelink_cli.exceptions.base import WaveLinkCliError


class InvalidPercentError(WaveLinkCliError):
    """Raised when a percentage argument is not an integer between 0 and 100."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"{name} must be a number between 0 and 100")
        self.name = name
        self.value = value
