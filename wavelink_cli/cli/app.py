"""CLI application definition for the Wave Link CLI."""

import logging
from pathlib import Path

import typer

from wavelink_cli.client import WaveLinkClient
from wavelink_cli.constants import APP_NAME, VERSION
from wavelink_cli.output import ConsoleOutputHandler
from wavelink_cli.session import CommandRunner
from wavelink_cli.cli.utils import _configure_logging
from wavelink_cli.cli.commands import channel as channel_commands
from wavelink_cli.cli.commands import input as input_commands
from wavelink_cli.cli.commands import mix as mix_commands
from wavelink_cli.cli.commands import output as output_commands
from wavelink_cli.cli.commands.info import info

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="wavelink-cli",
    add_completion=False,
    help="Manage Elgato Wave Link 3.0 via command line.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Handle version flag callback for Typer CLI.

    Args:
        value: Whether the version flag was provided
    """
    if value:
        typer.echo(f"{APP_NAME} v{VERSION}")
        raise typer.Exit()


@app.callback()
def main(
        ctx: typer.Context,
        config: Path | None = typer.Option(
            None, "--config", "-c",
            dir_okay=False,
            help="Path to a YAML configuration file (default: wavelink_cli.yaml in the current directory)",
        ),
        verbose: bool = typer.Option(
            False, "--verbose",
            help="Enable verbose debug output"
        ),
        version: bool = typer.Option(
            None, "--version", "-v",
            callback=version_callback,
            is_eager=True,  # Critical: process before other options
            is_flag=True,
            help="Show version and exit."
        ),
) -> None:
    """Manage Elgato Wave Link 3.0 via command line."""

    _configure_logging(verbose)
    logger.debug("Verbose logging enabled")

    ctx.obj = CommandRunner(ConsoleOutputHandler(), client_factory=WaveLinkClient, config_path=config)


# Register commands
app.command(name="info", help="Show Wave Link application information")(info)
app.add_typer(output_commands.app, name="output")
app.add_typer(mix_commands.app, name="mix")
app.add_typer(channel_commands.app, name="channel")
app.add_typer(input_commands.app, name="input")
