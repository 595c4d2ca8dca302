"""Flattened views of entities returned by identifier resolution."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedMix:
    id: str
    name: str
    is_muted: bool


@dataclass(frozen=True)
class ResolvedChannel:
    id: str
    name: str
    is_muted: bool


@dataclass(frozen=True)
class ResolvedOutput:
    """An output together with the device that owns it."""

    device_id: str
    output_id: str
    current_mix_id: str | None
    device_name: str
    is_wave_device: bool
    output_name: str
    level: float
    is_muted: bool


@dataclass(frozen=True)
class ResolvedInput:
    """An input together with the device that owns it."""

    device_id: str
    device_name: str
    input_id: str
    input_name: str
    gain: float
    is_muted: bool
