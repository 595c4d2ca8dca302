"""Resolve user-supplied IDs or names to concrete Wave Link entities.

Every lookup fetches the current list from the client and matches
case-insensitively: an ID match anywhere in the list wins over a display-name
match. The ``require_*`` variants raise :class:`EntityNotFoundError` instead
of returning ``None``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from wavelink_cli.client import WaveLinkApi
from wavelink_cli.exceptions import EntityNotFoundError
from wavelink_cli.models import (
    ResolvedChannel,
    ResolvedInput,
    ResolvedMix,
    ResolvedOutput,
    channel_display_name,
)

T = TypeVar("T")


def _match(
    candidates: Iterable[T],
    query: str,
    get_id: Callable[[T], str],
    get_name: Callable[[T], str | None],
) -> T | None:
    """Return the first ID match, else the first name match, comparing case-insensitively."""
    items = list(candidates)
    needle = query.lower()
    for item in items:
        if get_id(item).lower() == needle:
            return item
    for item in items:
        name = get_name(item)
        if name is not None and name.lower() == needle:
            return item
    return None


async def find_mix(client: WaveLinkApi, id_or_name: str) -> ResolvedMix | None:
    mixes = await client.get_mixes()
    mix = _match(mixes, id_or_name, lambda m: m.id, lambda m: m.name)
    if mix is None:
        return None
    return ResolvedMix(id=mix.id, name=mix.display_name, is_muted=mix.is_muted)


async def find_channel(client: WaveLinkApi, id_or_name: str) -> ResolvedChannel | None:
    channels = await client.get_channels()
    channel = _match(channels, id_or_name, lambda c: c.id, channel_display_name)
    if channel is None:
        return None
    return ResolvedChannel(id=channel.id, name=channel_display_name(channel), is_muted=channel.is_muted)


async def find_output(client: WaveLinkApi, id_or_name: str) -> ResolvedOutput | None:
    state = await client.get_output_devices()
    pairs = [(device, output) for device in state.output_devices for output in device.outputs]
    match = _match(pairs, id_or_name, lambda p: p[1].id, lambda p: p[1].name)
    if match is None:
        return None
    device, output = match
    return ResolvedOutput(
        device_id=device.id,
        output_id=output.id,
        current_mix_id=output.mix_id or None,
        device_name=device.display_name,
        is_wave_device=device.is_wave_device,
        output_name=output.display_name,
        level=output.level,
        is_muted=output.is_muted,
    )


async def find_input(client: WaveLinkApi, id_or_name: str) -> ResolvedInput | None:
    devices = await client.get_input_devices()
    pairs = [(device, item) for device in devices for item in device.inputs]
    match = _match(pairs, id_or_name, lambda p: p[1].id, lambda p: p[1].name)
    if match is None:
        return None
    device, item = match
    return ResolvedInput(
        device_id=device.id,
        device_name=device.display_name,
        input_id=item.id,
        input_name=item.display_name,
        gain=item.gain.value,
        is_muted=item.is_muted,
    )


async def require_mix(client: WaveLinkApi, id_or_name: str) -> ResolvedMix:
    mix = await find_mix(client, id_or_name)
    if mix is None:
        raise EntityNotFoundError("Mix", id_or_name)
    return mix


async def require_channel(client: WaveLinkApi, id_or_name: str) -> ResolvedChannel:
    channel = await find_channel(client, id_or_name)
    if channel is None:
        raise EntityNotFoundError("Channel", id_or_name)
    return channel


async def require_output(client: WaveLinkApi, id_or_name: str) -> ResolvedOutput:
    output = await find_output(client, id_or_name)
    if output is None:
        raise EntityNotFoundError("Output", id_or_name)
    return output


async def require_input(client: WaveLinkApi, id_or_name: str) -> ResolvedInput:
    item = await find_input(client, id_or_name)
    if item is None:
        raise EntityNotFoundError("Input", id_or_name)
    return item
