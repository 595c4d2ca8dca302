"""Output handling package for the Wave Link CLI."""
from wavelink_cli.output.protocols import OutputHandler
from wavelink_cli.output.console import ConsoleOutputHandler
from wavelink_cli.output.formatting import format_flag, format_optional_percent, format_percent

__all__ = [
    "OutputHandler",
    "ConsoleOutputHandler",
    "format_flag",
    "format_optional_percent",
    "format_percent",
]
