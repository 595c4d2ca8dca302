"""Mix commands."""

import typer

from wavelink_cli.cli.utils import _get_runner, _parse_percent_argument
from wavelink_cli.operations import mix as ops
from wavelink_cli.operations.output import set_single_output_for_mix

app = typer.Typer(help="Manage mixes", no_args_is_help=True)

MIX_HELP = "ID or name of the mix (case-insensitive)"


@app.command("list", help="List all mixes with their IDs and names")
def list_mixes(ctx: typer.Context) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.list_mixes(client, runner.console))


@app.command(
    "set-output",
    help="Set a device as the ONLY output for a mix (removes all other outputs from that mix)",
)
def set_output(
        ctx: typer.Context,
        mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP),
        output: str = typer.Argument(
            ..., metavar="OUTPUT-ID-OR-NAME", help="ID or name of the output device (case-insensitive)"
        ),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: set_single_output_for_mix(client, runner.console, output, mix))


@app.command("set-volume", help="Set mix master volume")
def set_volume(
        ctx: typer.Context,
        mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP),
        volume: str = typer.Argument(..., help="Volume level (0-100)"),
) -> None:
    runner = _get_runner(ctx)
    percent = _parse_percent_argument(runner, volume, "Volume")
    runner.run(lambda client: ops.set_mix_volume(client, runner.console, mix, percent))


@app.command("mute", help="Mute a mix")
def mute(ctx: typer.Context, mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP)) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_mix_mute(client, runner.console, mix, True))


@app.command("unmute", help="Unmute a mix")
def unmute(ctx: typer.Context, mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP)) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_mix_mute(client, runner.console, mix, False))


@app.command("toggle-mute", help="Toggle mix mute state")
def toggle_mute(ctx: typer.Context, mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP)) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.toggle_mix_mute(client, runner.console, mix))
