"""Output handler protocols for the Wave Link CLI."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class OutputHandler(Protocol):
    """Protocol for user-facing output (console, captured buffers in tests)."""

    def print(self, message: str = "", **kwargs) -> None:
        """Print a plain line to standard output."""
        ...

    def info(self, message: str) -> None:
        """Print an informational message (alias for print)."""
        ...

    def error(self, message: str) -> None:
        """Print an error message to standard error."""
        ...
