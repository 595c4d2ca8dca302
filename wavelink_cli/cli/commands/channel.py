"""Channel commands."""

import typer

from wavelink_cli.cli.utils import _get_runner, _parse_percent_argument
from wavelink_cli.operations import channel as ops

app = typer.Typer(help="Manage channels", no_args_is_help=True)

CHANNEL_HELP = "ID or name of the channel (case-insensitive)"
MIX_HELP = "ID or name of the mix (case-insensitive)"


@app.command("list", help="List all channels with their IDs and names")
def list_channels(ctx: typer.Context) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.list_channels(client, runner.console))


@app.command("set-volume", help="Set channel master volume")
def set_volume(
        ctx: typer.Context,
        channel: str = typer.Argument(..., metavar="CHANNEL-ID-OR-NAME", help=CHANNEL_HELP),
        volume: str = typer.Argument(..., help="Volume level (0-100)"),
) -> None:
    runner = _get_runner(ctx)
    percent = _parse_percent_argument(runner, volume, "Volume")
    runner.run(lambda client: ops.set_channel_volume(client, runner.console, channel, percent))


@app.command("mute", help="Mute a channel")
def mute(
        ctx: typer.Context,
        channel: str = typer.Argument(..., metavar="CHANNEL-ID-OR-NAME", help=CHANNEL_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_channel_mute(client, runner.console, channel, True))


@app.command("unmute", help="Unmute a channel")
def unmute(
        ctx: typer.Context,
        channel: str = typer.Argument(..., metavar="CHANNEL-ID-OR-NAME", help=CHANNEL_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_channel_mute(client, runner.console, channel, False))


@app.command("toggle-mute", help="Toggle channel mute state")
def toggle_mute(
        ctx: typer.Context,
        channel: str = typer.Argument(..., metavar="CHANNEL-ID-OR-NAME", help=CHANNEL_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.toggle_channel_mute(client, runner.console, channel))


@app.command("set-mix-volume", help="Set channel volume in a specific mix")
def set_mix_volume(
        ctx: typer.Context,
        channel: str = typer.Argument(..., metavar="CHANNEL-ID-OR-NAME", help=CHANNEL_HELP),
        mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP),
        volume: str = typer.Argument(..., help="Volume level (0-100)"),
) -> None:
    runner = _get_runner(ctx)
    percent = _parse_percent_argument(runner, volume, "Volume")
    runner.run(lambda client: ops.set_channel_mix_volume(client, runner.console, channel, mix, percent))


@app.command("mute-in-mix", help="Mute a channel in a specific mix")
def mute_in_mix(
        ctx: typer.Context,
        channel: str = typer.Argument(..., metavar="CHANNEL-ID-OR-NAME", help=CHANNEL_HELP),
        mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_channel_mix_mute(client, runner.console, channel, mix, True))


@app.command("unmute-in-mix", help="Unmute a channel in a specific mix")
def unmute_in_mix(
        ctx: typer.Context,
        channel: str = typer.Argument(..., metavar="CHANNEL-ID-OR-NAME", help=CHANNEL_HELP),
        mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.set_channel_mix_mute(client, runner.console, channel, mix, False))


@app.command("toggle-mute-in-mix", help="Toggle channel mute state in a specific mix")
def toggle_mute_in_mix(
        ctx: typer.Context,
        channel: str = typer.Argument(..., metavar="CHANNEL-ID-OR-NAME", help=CHANNEL_HELP),
        mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.toggle_channel_mix_mute(client, runner.console, channel, mix))


@app.command("isolate", help="Mute all channels in a mix except for the specified one")
def isolate(
        ctx: typer.Context,
        channel: str = typer.Argument(
            ..., metavar="CHANNEL-ID-OR-NAME", help="ID or name of the channel to isolate (case-insensitive)"
        ),
        mix: str = typer.Argument(..., metavar="MIX-ID-OR-NAME", help=MIX_HELP),
) -> None:
    runner = _get_runner(ctx)
    runner.run(lambda client: ops.isolate_channel(client, runner.console, channel, mix))
