"""Root-level pytest configuration and shared fixtures.

This module provides fixtures that are universally applicable across
all test modules:
- An in-memory Wave Link client that records every call
- Factories for entity snapshots
- A mock output handler
"""

from __future__ import annotations

from typing import Any

import pytest
from pytest_mock import MockerFixture

from wavelink_cli.models import (
    ApplicationInfo,
    Channel,
    InputDevice,
    Mix,
    OutputDevice,
    OutputDevicesState,
)


# =============================================================================
# Fake Client
# =============================================================================

class FakeWaveLinkClient:
    """In-memory stand-in for ``WaveLinkClient``.

    Enumeration calls return the configured snapshots; mutation calls are
    recorded in ``calls`` in the order they were awaited and do not change
    the snapshots. Setting ``fail_on`` to a method name makes that method
    raise ``error``. ``disconnect_error`` makes ``disconnect`` raise after
    it has been counted.
    """

    def __init__(self) -> None:
        self.application_info = ApplicationInfo(appID="com.elgato.WaveLink", name="Wave Link", interfaceRevision=3)
        self.mixes: list[Mix] = []
        self.channels: list[Channel] = []
        self.output_state = OutputDevicesState()
        self.input_devices: list[InputDevice] = []
        self.calls: list[tuple[Any, ...]] = []
        self.connect_count = 0
        self.disconnect_count = 0
        self.fail_on: str | None = None
        self.error: Exception = RuntimeError("boom")
        self.disconnect_error: Exception | None = None

    def _maybe_fail(self, method: str) -> None:
        if self.fail_on == method:
            raise self.error

    @property
    def mutations(self) -> list[tuple[Any, ...]]:
        return [call for call in self.calls if not call[0].startswith("get_")]

    async def connect(self) -> None:
        self.connect_count += 1
        self._maybe_fail("connect")

    async def disconnect(self) -> None:
        self.disconnect_count += 1
        if self.disconnect_error is not None:
            raise self.disconnect_error

    async def get_application_info(self) -> ApplicationInfo:
        self.calls.append(("get_application_info",))
        self._maybe_fail("get_application_info")
        return self.application_info

    async def get_mixes(self) -> list[Mix]:
        self.calls.append(("get_mixes",))
        self._maybe_fail("get_mixes")
        return list(self.mixes)

    async def get_channels(self) -> list[Channel]:
        self.calls.append(("get_channels",))
        self._maybe_fail("get_channels")
        return list(self.channels)

    async def get_output_devices(self) -> OutputDevicesState:
        self.calls.append(("get_output_devices",))
        self._maybe_fail("get_output_devices")
        return self.output_state

    async def get_input_devices(self) -> list[InputDevice]:
        self.calls.append(("get_input_devices",))
        self._maybe_fail("get_input_devices")
        return list(self.input_devices)

    async def _record(self, method: str, *args: Any) -> None:
        self.calls.append((method, *args))
        self._maybe_fail(method)

    async def set_mix_volume(self, mix_id: str, level: float) -> None:
        await self._record("set_mix_volume", mix_id, level)

    async def set_mix_mute(self, mix_id: str, is_muted: bool) -> None:
        await self._record("set_mix_mute", mix_id, is_muted)

    async def set_channel_volume(self, channel_id: str, level: float) -> None:
        await self._record("set_channel_volume", channel_id, level)

    async def set_channel_mute(self, channel_id: str, is_muted: bool) -> None:
        await self._record("set_channel_mute", channel_id, is_muted)

    async def set_channel_mix_volume(self, channel_id: str, mix_id: str, level: float) -> None:
        await self._record("set_channel_mix_volume", channel_id, mix_id, level)

    async def set_channel_mix_mute(self, channel_id: str, mix_id: str, is_muted: bool) -> None:
        await self._record("set_channel_mix_mute", channel_id, mix_id, is_muted)

    async def set_output_volume(self, device_id: str, output_id: str, level: float) -> None:
        await self._record("set_output_volume", device_id, output_id, level)

    async def set_output_mute(self, device_id: str, output_id: str, is_muted: bool) -> None:
        await self._record("set_output_mute", device_id, output_id, is_muted)

    async def switch_output_mix(self, device_id: str, output_id: str, mix_id: str) -> None:
        await self._record("switch_output_mix", device_id, output_id, mix_id)

    async def remove_output_from_mix(self, device_id: str, output_id: str) -> None:
        await self._record("remove_output_from_mix", device_id, output_id)

    async def set_input_gain(self, device_id: str, input_id: str, gain: float) -> None:
        await self._record("set_input_gain", device_id, input_id, gain)

    async def set_input_mute(self, device_id: str, input_id: str, is_muted: bool) -> None:
        await self._record("set_input_mute", device_id, input_id, is_muted)


@pytest.fixture
def fake_client() -> FakeWaveLinkClient:
    """Create an empty in-memory Wave Link client."""
    return FakeWaveLinkClient()


# =============================================================================
# Entity Factories
# =============================================================================

@pytest.fixture
def mix_factory():
    """Factory fixture for creating Mix snapshots."""
    def _create(id: str = "mix-1", name: str | None = "Monitor Mix", level: float = 1.0,
                is_muted: bool = False) -> Mix:
        return Mix(id=id, name=name, level=level, is_muted=is_muted)

    return _create


@pytest.fixture
def channel_factory():
    """Factory fixture for creating Channel snapshots from plain payloads.

    ``mixes`` maps mix IDs to their muted flag.
    """
    def _create(id: str = "ch-1", name: str | None = "Music", *, is_muted: bool = False,
                mixes: dict[str, bool] | None = None, **extra: Any) -> Channel:
        data: dict[str, Any] = {"id": id, "name": name, "type": "Software", "level": 0.8,
                                "isMuted": is_muted, **extra}
        if mixes is not None:
            data["mixes"] = [{"id": mix_id, "level": 1.0, "isMuted": muted} for mix_id, muted in mixes.items()]
        return Channel.model_validate(data)

    return _create


@pytest.fixture
def output_device_factory():
    """Factory fixture for creating OutputDevice snapshots.

    ``outputs`` is a list of ``(output_id, name, mix_id)`` tuples.
    """
    def _create(id: str = "dev-1", name: str | None = "Speakers",
                outputs: list[tuple[str, str | None, str | None]] | None = None,
                is_wave_device: bool = False, is_muted: bool = False) -> OutputDevice:
        return OutputDevice.model_validate({
            "id": id,
            "name": name,
            "isWaveDevice": is_wave_device,
            "outputs": [
                {"id": output_id, "name": output_name, "mixId": mix_id, "level": 0.5, "isMuted": is_muted}
                for output_id, output_name, mix_id in (outputs or [])
            ],
        })

    return _create


@pytest.fixture
def input_device_factory():
    """Factory fixture for creating InputDevice snapshots.

    ``inputs`` is a list of raw input payload dictionaries.
    """
    def _create(id: str = "in-dev-1", name: str | None = "Wave:3",
                inputs: list[dict[str, Any]] | None = None) -> InputDevice:
        return InputDevice.model_validate({"id": id, "name": name, "isWaveDevice": True, "inputs": inputs or []})

    return _create


# =============================================================================
# Output Handler Fixtures
# =============================================================================

@pytest.fixture
def mock_output_handler(mocker: MockerFixture):
    """Create a mock OutputHandler for dependency injection."""
    handler = mocker.MagicMock()
    handler.print = mocker.MagicMock()
    handler.info = mocker.MagicMock()
    handler.error = mocker.MagicMock()
    return handler


def printed_lines(handler) -> list[str]:
    """Return every message passed to ``handler.print``, split into lines."""
    lines: list[str] = []
    for call in handler.print.call_args_list:
        message = call.args[0] if call.args else ""
        lines.extend(message.split("\n"))
    return lines


@pytest.fixture
def printed():
    """Expose ``printed_lines`` to tests without importing conftest."""
    return printed_lines


# =============================================================================
# Configuration Markers
# =============================================================================

def pytest_configure(config):
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
