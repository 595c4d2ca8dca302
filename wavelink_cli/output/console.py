"""Console-based output handler for the Wave Link CLI."""

from rich.console import Console
from rich.markup import escape


class ConsoleOutputHandler:
    """Rich Console-based output handler.

    Listings and confirmations go to standard output verbatim; entity names
    are never interpreted as Rich markup or emoji codes. Errors go to
    standard error.
    """

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self.console = console or Console(highlight=False, emoji=False)
        self.error_console = error_console or Console(stderr=True, highlight=False, emoji=False)

    def print(self, message: str = "", **kwargs) -> None:
        """Print a plain line."""
        kwargs.setdefault("markup", False)
        kwargs.setdefault("emoji", False)
        kwargs.setdefault("soft_wrap", True)
        self.console.print(message, **kwargs)

    def info(self, message: str) -> None:
        """Print an informational message."""
        self.print(message)

    def error(self, message: str) -> None:
        """Print an error message."""
        self.error_console.print(f"[red]Error:[/red] {escape(message)}", emoji=False, soft_wrap=True)
