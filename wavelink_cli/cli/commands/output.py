"""Output device commands."""

import typer

from wavelink_cli.cli.utils import _get_runner, _parse_percent_argument
from wavelink_cli.operations import output as ops

app = typer.Typer(help="Manage output devices", no_args_is_help=True)

OUTPUT_HELP = "ID or name of the output device (case-insensitive)"


@app.command("list", help="List all output devices with their IDs and current mix assignments")
def list_outputs(ctx: typer.Context) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.list_outputs(client, runner.console))


@app.command("assign", help="Assign an output device to a specific mix")
def assign(
        ctx: typer.Context,
        output: str = typer.Argument(..., metavar="OUTPUT-ID-OR-NAME", help=OUTPUT_HELP),
        mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help="ID or name of the mix (case-insensitive)"),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.assign_output_to_mix(client, runner.console, output, mix))


@app.command("unassign", help="Unassign an output device from its current mix")
def unassign(
        ctx: typer.Context,
        output: str = typer.Argument(..., metavar="OUTPUT-ID-OR-NAME", help=OUTPUT_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.unassign_output(client, runner.console, output))


@app.command("set-volume", help="Set output device volume")
def set_volume(
        ctx: typer.Context,
        output: str = typer.Argument(..., metavar="OUTPUT-ID-OR-NAME", help=OUTPUT_HELP),
        volume: str = typer.Argument(..., help="Volume level (0-100)"),
) -> None:
    runner = _get_runner(ctx)
    percent = _parse_percent_argument(runner, volume, "Volume")
    runner.run(lambda client: ops.set_output_volume(client, runner.console, output, percent))


@app.command("mute", help="Mute an output device")
def mute(
        ctx: typer.Context,
        output: str = typer.Argument(..., metavar="OUTPUT-ID-OR-NAME", help=OUTPUT_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_output_mute(client, runner.console, output, True))


@app.command("unmute", help="Unmute an output device")
def unmute(
        ctx: typer.Context,
        output: str = typer.Argument(..., metavar="OUTPUT-ID-OR-NAME", help=OUTPUT_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_output_mute(client, runner.console, output, False))


@app.command("toggle-mute", help="Toggle output device mute state")
def toggle_mute(
        ctx: typer.Context,
        output: str = typer.Argument(..., metavar="OUTPUT-ID-OR-NAME", help=OUTPUT_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.toggle_output_mute(client, runner.console, output))
