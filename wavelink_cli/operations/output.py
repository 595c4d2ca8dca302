"""Output device listing, level/mute and mix-membership operations."""

from dataclasses import dataclass

from wavelink_cli.client import WaveLinkApi
from wavelink_cli.finders import require_mix, require_output
from wavelink_cli.models import ResolvedMix, ResolvedOutput
from wavelink_cli.output import OutputHandler, format_flag, format_percent
from wavelink_cli.validators import percent_to_fraction


@dataclass(frozen=True)
class ExclusiveOutputResult:
    """Outcome of making one output the only output of a mix."""

    target_assigned: bool
    removed: int


async def list_outputs(client: WaveLinkApi, console: OutputHandler) -> None:
    state = await client.get_output_devices()
    mixes = {mix.id: mix for mix in await client.get_mixes()}

    console.print("\n=== Output Devices ===\n")

    if not state.output_devices:
        console.print("No output devices found.")
        return

    for device in state.output_devices:
        main = " (MAIN OUTPUT)" if device.id == state.main_output else ""
        console.print(f"Device: {device.display_name}{main}")
        console.print(f"  Device ID: {device.id}")
        console.print(f"  Wave Device: {format_flag(device.is_wave_device)}")

        if not device.outputs:
            console.print("  No outputs available")

        for output in device.outputs:
            if output.mix_id:
                mix = mixes.get(output.mix_id)
                mix_name = mix.display_name if mix is not None else output.mix_id
                mix_display = f"{mix_name} ({output.mix_id})"
            else:
                mix_display = "Not assigned"
            console.print(f"  Output: {output.display_name}")
            console.print(f"    Output ID: {output.id}")
            console.print(f"    Current Mix: {mix_display}")
            console.print(f"    Level: {format_percent(output.level)}")
            console.print(f"    Muted: {format_flag(output.is_muted)}")
        console.print()


async def set_output_volume(client: WaveLinkApi, console: OutputHandler, output_id: str, volume_percent: int) -> None:
    output = await require_output(client, output_id)
    await client.set_output_volume(output.device_id, output.output_id, percent_to_fraction(volume_percent))
    console.print(f"Successfully set output '{output.output_name}' volume to {volume_percent}%")


async def set_output_mute(client: WaveLinkApi, console: OutputHandler, output_id: str, is_muted: bool) -> None:
    output = await require_output(client, output_id)
    await _apply_output_mute(client, console, output, is_muted)


async def toggle_output_mute(client: WaveLinkApi, console: OutputHandler, output_id: str) -> None:
    output = await require_output(client, output_id)
    await _apply_output_mute(client, console, output, not output.is_muted)


async def _apply_output_mute(
    client: WaveLinkApi, console: OutputHandler, output: ResolvedOutput, is_muted: bool
) -> None:
    await client.set_output_mute(output.device_id, output.output_id, is_muted)
    console.print(f"Successfully {'muted' if is_muted else 'unmuted'} output '{output.output_name}'")


async def assign_output_to_mix(client: WaveLinkApi, console: OutputHandler, output_id: str, mix_id: str) -> None:
    mix = await require_mix(client, mix_id)
    output = await require_output(client, output_id)

    if output.current_mix_id == mix.id:
        console.print(f"Output '{output.output_name}' is already assigned to mix '{mix.name}'")
        return

    await client.switch_output_mix(output.device_id, output.output_id, mix.id)
    console.print(f"Successfully assigned output '{output.output_name}' to mix '{mix.name}'")


async def unassign_output(client: WaveLinkApi, console: OutputHandler, output_id: str) -> None:
    output = await require_output(client, output_id)
    await client.remove_output_from_mix(output.device_id, output.output_id)
    console.print(f"Successfully unassigned output '{output.output_name}'")


async def make_exclusive_output(
    client: WaveLinkApi, target: ResolvedOutput, mix: ResolvedMix
) -> ExclusiveOutputResult:
    """Attach ``target`` to ``mix`` and detach every other output from it.

    Membership is read once from a single snapshot; calls are issued one at a
    time in device/output order. Calls already made are not undone if a later
    one fails.
    """
    state = await client.get_output_devices()

    target_assigned = False
    removed = 0
    for device in state.output_devices:
        for output in device.outputs:
            is_target = device.id == target.device_id and output.id == target.output_id
            if is_target and output.mix_id != mix.id:
                await client.switch_output_mix(device.id, output.id, mix.id)
                target_assigned = True
            elif not is_target and output.mix_id == mix.id:
                await client.remove_output_from_mix(device.id, output.id)
                removed += 1

    return ExclusiveOutputResult(target_assigned=target_assigned, removed=removed)


def describe_exclusive_output(result: ExclusiveOutputResult, output_name: str, mix_name: str) -> str:
    if result.target_assigned and result.removed:
        return (
            f"Successfully set '{output_name}' as the only output for mix '{mix_name}' "
            f"(removed {result.removed} other output(s) from the mix)"
        )
    if result.target_assigned:
        return (
            f"Successfully assigned '{output_name}' to mix '{mix_name}' "
            "(it is now the only output on this mix)"
        )
    if result.removed:
        return (
            f"'{output_name}' was already assigned to mix '{mix_name}'. "
            f"Removed {result.removed} other output(s) from the mix."
        )
    return f"'{output_name}' is already the only output for mix '{mix_name}'"


async def set_single_output_for_mix(
    client: WaveLinkApi, console: OutputHandler, output_id: str, mix_id: str
) -> ExclusiveOutputResult:
    mix = await require_mix(client, mix_id)
    target = await require_output(client, output_id)
    result = await make_exclusive_output(client, target, mix)
    console.print(describe_exclusive_output(result, target.output_name, mix.name))
    return result
