"""Mix listing and master level/mute operations."""

from wavelink_cli.client import WaveLinkApi
from wavelink_cli.finders import require_mix
from wavelink_cli.output import OutputHandler, format_flag, format_percent
from wavelink_cli.validators import percent_to_fraction


async def list_mixes(client: WaveLinkApi, console: OutputHandler) -> None:
    mixes = await client.get_mixes()

    console.print("\n=== Mixes ===\n")

    if not mixes:
        console.print("No mixes found.")
        return

    for mix in mixes:
        console.print(f"Mix: {mix.display_name}")
        console.print(f"  ID: {mix.id}")
        console.print(f"  Level: {format_percent(mix.level)}")
        console.print(f"  Muted: {format_flag(mix.is_muted)}")
        console.print()


async def set_mix_volume(client: WaveLinkApi, console: OutputHandler, mix_id: str, volume_percent: int) -> None:
    mix = await require_mix(client, mix_id)
    await client.set_mix_volume(mix.id, percent_to_fraction(volume_percent))
    console.print(f"Successfully set mix '{mix.name}' volume to {volume_percent}%")


async def set_mix_mute(client: WaveLinkApi, console: OutputHandler, mix_id: str, is_muted: bool) -> None:
    mix = await require_mix(client, mix_id)
    await client.set_mix_mute(mix.id, is_muted)
    console.print(f"Successfully {'muted' if is_muted else 'unmuted'} mix '{mix.name}'")


async def toggle_mix_mute(client: WaveLinkApi, console: OutputHandler, mix_id: str) -> None:
    mix = await require_mix(client, mix_id)
    await client.set_mix_mute(mix.id, not mix.is_muted)
    console.print(f"Successfully toggled mute for mix '{mix.name}'")
