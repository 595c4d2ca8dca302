"""Input device listing, gain and mute operations."""

from wavelink_cli.client import WaveLinkApi
from wavelink_cli.finders import require_input
from wavelink_cli.models import Input
from wavelink_cli.output import OutputHandler, format_flag, format_optional_percent, format_percent
from wavelink_cli.validators import percent_to_fraction


def _gain_line(item: Input) -> str:
    gain = item.gain
    gain_max = gain.max if gain.max is not None else gain.max_range
    return (
        f"Gain: {format_percent(gain.value)} "
        f"(min: {format_optional_percent(gain.min)}, max: {format_optional_percent(gain_max)})"
    )


async def list_inputs(client: WaveLinkApi, console: OutputHandler) -> None:
    devices = await client.get_input_devices()

    console.print("\n=== Input Devices ===\n")

    if not devices:
        console.print("No input devices found.")
        return

    for device in devices:
        console.print(f"Device: {device.display_name}")
        console.print(f"  Device ID: {device.id}")
        console.print(f"  Wave Device: {format_flag(device.is_wave_device)}")

        if not device.inputs:
            console.print("  No inputs available")

        for item in device.inputs:
            console.print(f"  Input: {item.display_name}")
            console.print(f"    Input ID: {item.id}")
            console.print(f"    {_gain_line(item)}")
            if item.is_gain_lock_on is not None:
                console.print(f"    Gain Lock: {format_flag(item.is_gain_lock_on)}")
            console.print(f"    Muted: {format_flag(item.is_muted)}")
            if item.mic_pc_mix is not None:
                inverted = " (inverted)" if item.mic_pc_mix.is_inverted else ""
                console.print(f"    Mic/PC Mix: {format_percent(item.mic_pc_mix.value)}{inverted}")
            if item.effects:
                effects = ", ".join(
                    f"{effect.display_name} ({'ON' if effect.is_enabled else 'OFF'})" for effect in item.effects
                )
                console.print(f"    Effects: {effects}")
        console.print()


async def set_input_gain(client: WaveLinkApi, console: OutputHandler, input_id: str, gain_percent: int) -> None:
    item = await require_input(client, input_id)
    await client.set_input_gain(item.device_id, item.input_id, percent_to_fraction(gain_percent))
    console.print(f"Successfully set input '{item.input_name}' gain to {gain_percent}%")


async def set_input_mute(client: WaveLinkApi, console: OutputHandler, input_id: str, is_muted: bool) -> None:
    item = await require_input(client, input_id)
    await client.set_input_mute(item.device_id, item.input_id, is_muted)
    console.print(f"Successfully {'muted' if is_muted else 'unmuted'} input '{item.input_name}'")


async def toggle_input_mute(client: WaveLinkApi, console: OutputHandler, input_id: str) -> None:
    item = await require_input(client, input_id)
    is_muted = not item.is_muted
    await client.set_input_mute(item.device_id, item.input_id, is_muted)
    console.print(f"Successfully {'muted' if is_muted else 'unmuted'} input '{item.input_name}'")
