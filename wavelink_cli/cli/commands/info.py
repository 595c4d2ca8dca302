"""Application info command."""

import typer

from wavelink_cli.cli.utils import _get_runner
from wavelink_cli.operations.info import show_application_info


def info(ctx: typer.Context) -> None:
    """Show Wave Link application information."""
    runner = _get_runner(ctx)
    runner.run(lambda client: show_application_info(client, runner.console))
