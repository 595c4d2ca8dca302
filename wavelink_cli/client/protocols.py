"""Protocol describing the Wave Link client surface used by the commands."""

from typing import Protocol, runtime_checkable

from wavelink_cli.models import (
    ApplicationInfo,
    Channel,
    InputDevice,
    Mix,
    OutputDevicesState,
)


@runtime_checkable
class WaveLinkApi(Protocol):
    """Session with the Wave Link application.

    ``WaveLinkClient`` is the production implementation; tests inject an
    in-memory fake with the same methods.
    """

    async def connect(self) -> None: ...

    async def disconnect(self) -> None: ...

    async def get_application_info(self) -> ApplicationInfo: ...

    async def get_mixes(self) -> list[Mix]: ...

    async def get_channels(self) -> list[Channel]: ...

    async def get_output_devices(self) -> OutputDevicesState: ...

    async def get_input_devices(self) -> list[InputDevice]: ...

    async def set_mix_volume(self, mix_id: str, level: float) -> None: ...

    async def set_mix_mute(self, mix_id: str, is_muted: bool) -> None: ...

    async def set_channel_volume(self, channel_id: str, level: float) -> None: ...

    async def set_channel_mute(self, channel_id: str, is_muted: bool) -> None: ...

    async def set_channel_mix_volume(self, channel_id: str, mix_id: str, level: float) -> None: ...

    async def set_channel_mix_mute(self, channel_id: str, mix_id: str, is_muted: bool) -> None: ...

    async def set_output_volume(self, device_id: str, output_id: str, level: float) -> None: ...

    async def set_output_mute(self, device_id: str, output_id: str, is_muted: bool) -> None: ...

    async def switch_output_mix(self, device_id: str, output_id: str, mix_id: str) -> None: ...

    async def remove_output_from_mix(self, device_id: str, output_id: str) -> None: ...

    async def set_input_gain(self, device_id: str, input_id: str, gain: float) -> None: ...

    async def set_input_mute(self, device_id: str, input_id: str, is_muted: bool) -> None: ...
