"""Input device commands."""

import typer

from wavelink_cli.cli.utils import _get_runner, _parse_percent_argument
from wavelink_cli.operations import input as ops

app = typer.Typer(help="Manage input devices", no_args_is_help=True)

INPUT_HELP = "ID or name of the input device (case-insensitive)"


@app.command("list", help="List all input devices with their IDs")
def list_inputs(ctx: typer.Context) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.list_inputs(client, runner.console))


@app.command("set-gain", help="Set input device gain")
def set_gain(
        ctx: typer.Context,
        input_id: str = typer.Argument(..., metavar="INPUT-ID-OR-NAME", help=INPUT_HELP),
        gain: str = typer.Argument(..., help="Gain level (0-100)"),
) -> None:
    runner = _get_runner(ctx)
    percent = _parse_percent_argument(runner, gain, "Gain")
    runner.run(lambda client: ops.set_input_gain(client, runner.console, input_id, percent))


@app.command("mute", help="Mute an input device")
def mute(
        ctx: typer.Context,
        input_id: str = typer.Argument(..., metavar="INPUT-ID-OR-NAME", help=INPUT_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_input_mute(client, runner.console, input_id, True))


@app.command("unmute", help="Unmute an input device")
def unmute(
        ctx: typer.Context,
        input_id: str = typer.Argument(..., metavar="INPUT-ID-OR-NAME", help=INPUT_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_input_mute(client, runner.console, input_id, False))


@app.command("toggle-mute", help="Toggle input device mute state")
def toggle_mute(
        ctx: typer.Context,
        input_id: str = typer.Argument(..., metavar="INPUT-ID-OR-NAME", help=INPUT_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.toggle_input_mute(client, runner.console, input_id))
