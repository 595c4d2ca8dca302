"""Channel listing, level/mute, per-mix and isolation operations."""

from dataclasses import dataclass

from wavelink_cli.client import WaveLinkApi
from wavelink_cli.exceptions import ChannelNotInMixError, EntityNotFoundError
from wavelink_cli.finders import require_channel, require_mix
from wavelink_cli.models import ResolvedChannel, ResolvedMix, channel_display_name
from wavelink_cli.output import OutputHandler, format_flag, format_percent
from wavelink_cli.validators import percent_to_fraction


@dataclass(frozen=True)
class IsolationResult:
    """Outcome of muting every channel in a mix except one.

    ``target_unmuted`` is False when the target was already unmuted or has
    no assignment in the mix.
    """

    muted: int
    already_muted: int
    target_unmuted: bool


async def list_channels(client: WaveLinkApi, console: OutputHandler) -> None:
    channels = await client.get_channels()

    console.print("\n=== Channels ===\n")

    if not channels:
        console.print("No channels found.")
        return

    for channel in channels:
        console.print(f"Channel: {channel_display_name(channel)}")
        console.print(f"  ID: {channel.id}")
        console.print(f"  Type: {channel.type}")
        console.print(f"  Level: {format_percent(channel.level)}")
        console.print(f"  Muted: {format_flag(channel.is_muted)}")

        if channel.apps:
            console.print(f"  Apps: {', '.join(app.display_name for app in channel.apps)}")

        if channel.mixes:
            console.print("  Mix Assignments:")
            for assignment in channel.mixes:
                console.print(
                    f"    {assignment.id}: Level {format_percent(assignment.level)}, "
                    f"Muted: {format_flag(assignment.is_muted)}"
                )
        console.print()


async def set_channel_volume(client: WaveLinkApi, console: OutputHandler, channel_id: str, volume_percent: int) -> None:
    channel = await require_channel(client, channel_id)
    await client.set_channel_volume(channel.id, percent_to_fraction(volume_percent))
    console.print(f"Successfully set channel '{channel.name}' volume to {volume_percent}%")


async def set_channel_mute(client: WaveLinkApi, console: OutputHandler, channel_id: str, is_muted: bool) -> None:
    channel = await require_channel(client, channel_id)
    await client.set_channel_mute(channel.id, is_muted)
    console.print(f"Successfully {'muted' if is_muted else 'unmuted'} channel '{channel.name}'")


async def toggle_channel_mute(client: WaveLinkApi, console: OutputHandler, channel_id: str) -> None:
    channel = await require_channel(client, channel_id)
    await client.set_channel_mute(channel.id, not channel.is_muted)
    console.print(f"Successfully toggled mute for channel '{channel.name}'")


async def set_channel_mix_volume(
    client: WaveLinkApi, console: OutputHandler, channel_id: str, mix_id: str, volume_percent: int
) -> None:
    channel = await require_channel(client, channel_id)
    mix = await require_mix(client, mix_id)
    await client.set_channel_mix_volume(channel.id, mix.id, percent_to_fraction(volume_percent))
    console.print(f"Successfully set channel '{channel.name}' volume to {volume_percent}% in mix '{mix.name}'")


async def set_channel_mix_mute(
    client: WaveLinkApi, console: OutputHandler, channel_id: str, mix_id: str, is_muted: bool
) -> None:
    channel = await require_channel(client, channel_id)
    mix = await require_mix(client, mix_id)
    await client.set_channel_mix_mute(channel.id, mix.id, is_muted)
    console.print(f"Successfully {'muted' if is_muted else 'unmuted'} channel '{channel.name}' in mix '{mix.name}'")


async def toggle_channel_mix_mute(client: WaveLinkApi, console: OutputHandler, channel_id: str, mix_id: str) -> None:
    channel = await require_channel(client, channel_id)
    mix = await require_mix(client, mix_id)

    channels = await client.get_channels()
    current = next((c for c in channels if c.id == channel.id), None)
    if current is None:
        raise EntityNotFoundError("Channel", channel_id)

    assignment = current.mix_assignment(mix.id)
    if assignment is None:
        raise ChannelNotInMixError(channel.name, mix.name)

    await client.set_channel_mix_mute(channel.id, mix.id, not assignment.is_muted)
    console.print(f"Successfully toggled mute for channel '{channel.name}' in mix '{mix.name}'")


async def isolate_in_mix(
    client: WaveLinkApi, console: OutputHandler, target: ResolvedChannel, mix: ResolvedMix
) -> IsolationResult:
    """Unmute ``target`` in ``mix`` and mute every other channel assigned to it.

    Channels without an assignment in the mix are skipped and not counted.
    Assignments are read from one snapshot and changed sequentially in list
    order; nothing is rolled back if a later call fails.
    """
    channels = await client.get_channels()

    muted = 0
    already_muted = 0
    target_unmuted = False
    for channel in channels:
        assignment = channel.mix_assignment(mix.id)
        if assignment is None:
            continue

        if channel.id == target.id:
            if assignment.is_muted:
                await client.set_channel_mix_mute(channel.id, mix.id, False)
                target_unmuted = True
                console.print(f"Unmuted target channel '{channel_display_name(channel)}'")
            else:
                console.print(f"Target channel '{channel_display_name(channel)}' is already unmuted")
        elif not assignment.is_muted:
            await client.set_channel_mix_mute(channel.id, mix.id, True)
            muted += 1
        else:
            already_muted += 1

    return IsolationResult(muted=muted, already_muted=already_muted, target_unmuted=target_unmuted)


async def isolate_channel(
    client: WaveLinkApi, console: OutputHandler, channel_id: str, mix_id: str
) -> IsolationResult:
    mix = await require_mix(client, mix_id)
    target = await require_channel(client, channel_id)
    result = await isolate_in_mix(client, console, target, mix)
    console.print(
        f"SUCCESS: Isolated '{target.name}' in mix '{mix.name}'.\n"
        f"  - Muted {result.muted} other channels.\n"
        f"  - {result.already_muted} channels were already muted."
    )
    return result
