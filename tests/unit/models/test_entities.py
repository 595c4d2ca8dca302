"""Unit tests for entity snapshot models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wavelink_cli.models import (
    ApplicationInfo,
    Channel,
    Input,
    Mix,
    OutputDevicesState,
    channel_display_name,
)


class TestChannelDisplayName:
    """Tests for the channel name fallback chain."""

    def test_prefers_explicit_name(self) -> None:
        channel = Channel.model_validate({"id": "c1", "name": "Music", "image": {"name": "Spotify"}})
        assert channel_display_name(channel) == "Music"

    def test_falls_back_to_image_name(self) -> None:
        channel = Channel.model_validate({"id": "c1", "image": {"name": "Spotify"}})
        assert channel_display_name(channel) == "Spotify"

    def test_falls_back_to_id(self) -> None:
        channel = Channel.model_validate({"id": "c1", "image": {}})
        assert channel_display_name(channel) == "c1"

    def test_empty_name_is_kept(self) -> None:
        """An explicit empty name is still a name."""
        channel = Channel.model_validate({"id": "c1", "name": "", "image": {"name": "Spotify"}})
        assert channel_display_name(channel) == ""


class TestPayloadParsing:
    """Tests for parsing camelCase payloads."""

    def test_application_info_aliases(self) -> None:
        info = ApplicationInfo.model_validate({"appID": "wl", "name": "Wave Link", "interfaceRevision": 3})
        assert info.app_id == "wl"
        assert info.interface_revision == 3

    def test_output_devices_state(self) -> None:
        state = OutputDevicesState.model_validate({
            "mainOutput": "dev-1",
            "outputDevices": [{
                "id": "dev-1",
                "isWaveDevice": True,
                "outputs": [{"id": "out-1", "mixId": "mix-1", "level": 0.25, "isMuted": True}],
            }],
        })
        device = state.output_devices[0]
        assert state.main_output == "dev-1"
        assert device.is_wave_device is True
        assert device.display_name == "dev-1"
        assert device.outputs[0].mix_id == "mix-1"
        assert device.outputs[0].is_muted is True

    def test_input_optional_fields(self) -> None:
        item = Input.model_validate({
            "id": "in-1",
            "gain": {"value": 0.5, "maxRange": 0.9},
            "isMuted": False,
            "isGainLockOn": True,
            "micPcMix": {"value": 0.3, "isInverted": True},
            "effects": [{"id": "fx-1", "isEnabled": True}],
        })
        assert item.gain.max is None
        assert item.gain.max_range == 0.9
        assert item.is_gain_lock_on is True
        assert item.mic_pc_mix is not None and item.mic_pc_mix.is_inverted is True
        assert item.effects is not None and item.effects[0].display_name == "fx-1"

    def test_unknown_fields_are_ignored(self) -> None:
        mix = Mix.model_validate({"id": "m1", "name": "Stream", "level": 1, "isMuted": False, "color": "#fff"})
        assert mix.display_name == "Stream"

    def test_snapshots_are_frozen(self) -> None:
        mix = Mix(id="m1")
        with pytest.raises(ValidationError):
            mix.is_muted = True  # type: ignore[misc]

    def test_mix_assignment_lookup(self) -> None:
        channel = Channel.model_validate({
            "id": "c1",
            "mixes": [{"id": "m1", "level": 1.0, "isMuted": True}],
        })
        assert channel.mix_assignment("m1") is not None
        assert channel.mix_assignment("m1").is_muted is True
        assert channel.mix_assignment("m2") is None

    def test_mix_assignment_without_mixes(self) -> None:
        assert Channel(id="c1").mix_assignment("m1") is None
