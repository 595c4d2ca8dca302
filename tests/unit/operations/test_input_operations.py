"""Unit tests for input device operations."""

from __future__ import annotations

import pytest

from wavelink_cli.operations.input import list_inputs, set_input_gain, set_input_mute, toggle_input_mute

pytestmark = pytest.mark.asyncio


@pytest.fixture
def mic_client(fake_client, input_device_factory):
    fake_client.input_devices = [input_device_factory(id="wave3", inputs=[
        {
            "id": "mic-1",
            "name": "Microphone",
            "gain": {"value": 0.5, "min": 0.0, "maxRange": 0.75},
            "isMuted": False,
            "isGainLockOn": False,
            "micPcMix": {"value": 0.3, "isInverted": True},
            "effects": [{"id": "fx-1", "name": "Clipguard", "isEnabled": True}, {"id": "fx-2", "isEnabled": False}],
        },
        {"id": "mic-2", "gain": {"value": 0.1}, "isMuted": True},
    ])]
    return fake_client


class TestInputOperations:
    """Tests for input gain and mute."""

    async def test_set_gain(self, mic_client, mock_output_handler) -> None:
        await set_input_gain(mic_client, mock_output_handler, "microphone", 25)

        assert mic_client.mutations == [("set_input_gain", "wave3", "mic-1", 0.25)]
        mock_output_handler.print.assert_called_once_with("Successfully set input 'Microphone' gain to 25%")

    async def test_mute(self, mic_client, mock_output_handler) -> None:
        await set_input_mute(mic_client, mock_output_handler, "mic-1", True)

        assert mic_client.mutations == [("set_input_mute", "wave3", "mic-1", True)]
        mock_output_handler.print.assert_called_once_with("Successfully muted input 'Microphone'")

    async def test_toggle_inverts_observed_state(self, mic_client, mock_output_handler) -> None:
        await toggle_input_mute(mic_client, mock_output_handler, "MIC-2")

        assert mic_client.mutations == [("set_input_mute", "wave3", "mic-2", False)]
        mock_output_handler.print.assert_called_once_with("Successfully unmuted input 'mic-2'")


class TestListInputs:
    """Tests for the input listing."""

    async def test_lists_optional_details(self, mic_client, mock_output_handler, printed) -> None:
        await list_inputs(mic_client, mock_output_handler)

        lines = printed(mock_output_handler)
        assert "Device: Wave:3" in lines
        assert "  Wave Device: Yes" in lines
        assert "    Gain: 50% (min: 0%, max: 75%)" in lines
        assert "    Gain Lock: No" in lines
        assert "    Mic/PC Mix: 30% (inverted)" in lines
        assert "    Effects: Clipguard (ON), fx-2 (OFF)" in lines

    async def test_missing_gain_bounds_are_unknown(self, mic_client, mock_output_handler, printed) -> None:
        await list_inputs(mic_client, mock_output_handler)

        lines = printed(mock_output_handler)
        assert "    Gain: 10% (min: unknown, max: unknown)" in lines
        assert lines.count("    Gain Lock: No") == 1

    async def test_device_without_inputs(self, fake_client, input_device_factory, mock_output_handler, printed) -> None:
        fake_client.input_devices = [input_device_factory()]

        await list_inputs(fake_client, mock_output_handler)

        assert "  No inputs available" in printed(mock_output_handler)

    async def test_empty_list(self, fake_client, mock_output_handler, printed) -> None:
        await list_inputs(fake_client, mock_output_handler)

        assert "No input devices found." in printed(mock_output_handler)
