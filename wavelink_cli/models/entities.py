"""Pydantic snapshots of the state owned by the Wave Link application.

Snapshots are fetched fresh for every command and never mutated locally; any
change is made through the client and observed by fetching again.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class WaveLinkModel(BaseModel):
    """Immutable model parsed from Wave Link's camelCase payloads."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )


class ApplicationInfo(WaveLinkModel):
    """Identity of the running Wave Link application."""

    app_id: str = Field(..., alias="appID")
    name: str
    interface_revision: int | str


class Mix(WaveLinkModel):
    """A named aggregate bus with its own level and mute state."""

    id: str
    name: str | None = None
    level: float = 0.0
    is_muted: bool = False

    @property
    def display_name(self) -> str:
        return self.name or self.id


class Output(WaveLinkModel):
    """A single playback endpoint on an output device."""

    id: str
    name: str | None = None
    mix_id: str | None = None
    level: float = 0.0
    is_muted: bool = False

    @property
    def display_name(self) -> str:
        return self.name or self.id


class OutputDevice(WaveLinkModel):
    """A physical or virtual playback device exposing one or more outputs."""

    id: str
    name: str | None = None
    is_wave_device: bool = False
    outputs: tuple[Output, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name or self.id


class OutputDevicesState(WaveLinkModel):
    """Result of enumerating output devices."""

    output_devices: tuple[OutputDevice, ...] = ()
    main_output: str | None = None


class ChannelImage(WaveLinkModel):
    name: str | None = None


class ChannelApp(WaveLinkModel):
    """An application whose audio is attributed to a channel."""

    id: str
    name: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.id


class ChannelMix(WaveLinkModel):
    """Per-mix level and mute override of a channel."""

    id: str
    level: float = 0.0
    is_muted: bool = False


class Channel(WaveLinkModel):
    """A logical audio source with a master level and per-mix assignments."""

    id: str
    name: str | None = None
    image: ChannelImage | None = None
    type: str = "unknown"
    level: float = 0.0
    is_muted: bool = False
    apps: tuple[ChannelApp, ...] | None = None
    mixes: tuple[ChannelMix, ...] | None = None

    def mix_assignment(self, mix_id: str) -> ChannelMix | None:
        """Return this channel's assignment for ``mix_id``, if any."""
        for assignment in self.mixes or ():
            if assignment.id == mix_id:
                return assignment
        return None


def channel_display_name(channel: Channel) -> str:
    """Return the channel's name, falling back to its image name, then its ID."""
    if channel.name is not None:
        return channel.name
    if channel.image is not None and channel.image.name is not None:
        return channel.image.name
    return channel.id


class Gain(WaveLinkModel):
    value: float = 0.0
    min: float | None = None
    max: float | None = None
    max_range: float | None = None


class MicPcMix(WaveLinkModel):
    value: float = 0.0
    is_inverted: bool = False


class Effect(WaveLinkModel):
    id: str
    name: str | None = None
    is_enabled: bool = False

    @property
    def display_name(self) -> str:
        return self.name or self.id


class Input(WaveLinkModel):
    """A capture endpoint with gain and mute controls."""

    id: str
    name: str | None = None
    gain: Gain = Gain()
    is_muted: bool = False
    is_gain_lock_on: bool | None = None
    mic_pc_mix: MicPcMix | None = None
    effects: tuple[Effect, ...] | None = None

    @property
    def display_name(self) -> str:
        return self.name or self.id


class InputDevice(WaveLinkModel):
    """A physical or virtual capture device exposing one or more inputs."""

    id: str
    name: str | None = None
    is_wave_device: bool = False
    inputs: tuple[Input, ...] = ()

    @property
    def display_name(self) -> str:
        return self.name or self.id
