"""Entity snapshots and resolved targets."""
from wavelink_cli.models.entities import (
    ApplicationInfo,
    Channel,
    ChannelApp,
    ChannelImage,
    ChannelMix,
    Effect,
    Gain,
    Input,
    InputDevice,
    MicPcMix,
    Mix,
    Output,
    OutputDevice,
    OutputDevicesState,
    WaveLinkModel,
    channel_display_name,
)
from wavelink_cli.models.resolved import (
    ResolvedChannel,
    ResolvedInput,
    ResolvedMix,
    ResolvedOutput,
)

__all__ = [
    "ApplicationInfo",
    "Channel",
    "ChannelApp",
    "ChannelImage",
    "ChannelMix",
    "Effect",
    "Gain",
    "Input",
    "InputDevice",
    "MicPcMix",
    "Mix",
    "Output",
    "OutputDevice",
    "OutputDevicesState",
    "WaveLinkModel",
    "channel_display_name",
    "ResolvedChannel",
    "ResolvedInput",
    "ResolvedMix",
    "ResolvedOutput",
]
