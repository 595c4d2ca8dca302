"""Unit tests for mix operations."""

from __future__ import annotations

import pytest

from wavelink_cli.exceptions import EntityNotFoundError
from wavelink_cli.operations.mix import list_mixes, set_mix_mute, set_mix_volume, toggle_mix_mute

pytestmark = pytest.mark.asyncio


class TestMixOperations:
    """Tests for mix level and mute."""

    async def test_set_volume(self, fake_client, mix_factory, mock_output_handler) -> None:
        fake_client.mixes = [mix_factory(id="mix-1", name="Monitor Mix")]

        await set_mix_volume(fake_client, mock_output_handler, "monitor mix", 65)

        assert fake_client.mutations == [("set_mix_volume", "mix-1", 0.65)]
        mock_output_handler.print.assert_called_once_with("Successfully set mix 'Monitor Mix' volume to 65%")

    async def test_mute_and_unmute(self, fake_client, mix_factory, mock_output_handler) -> None:
        fake_client.mixes = [mix_factory()]

        await set_mix_mute(fake_client, mock_output_handler, "mix-1", True)
        await set_mix_mute(fake_client, mock_output_handler, "mix-1", False)

        assert fake_client.mutations == [("set_mix_mute", "mix-1", True), ("set_mix_mute", "mix-1", False)]

    async def test_toggle_inverts_observed_state(self, fake_client, mix_factory, mock_output_handler) -> None:
        fake_client.mixes = [mix_factory(is_muted=True)]

        await toggle_mix_mute(fake_client, mock_output_handler, "MIX-1")

        assert fake_client.mutations == [("set_mix_mute", "mix-1", False)]
        mock_output_handler.print.assert_called_once_with("Successfully toggled mute for mix 'Monitor Mix'")

    async def test_unknown_mix(self, fake_client, mock_output_handler) -> None:
        with pytest.raises(EntityNotFoundError):
            await toggle_mix_mute(fake_client, mock_output_handler, "missing")

        assert fake_client.mutations == []


class TestListMixes:
    """Tests for the mix listing."""

    async def test_lists_mixes(self, fake_client, mix_factory, mock_output_handler, printed) -> None:
        fake_client.mixes = [mix_factory(level=0.375, is_muted=True)]

        await list_mixes(fake_client, mock_output_handler)

        lines = printed(mock_output_handler)
        assert "Mix: Monitor Mix" in lines
        assert "  ID: mix-1" in lines
        assert "  Level: 38%" in lines
        assert "  Muted: Yes" in lines

    async def test_empty_list(self, fake_client, mock_output_handler, printed) -> None:
        await list_mixes(fake_client, mock_output_handler)

        assert "No mixes found." in printed(mock_output_handler)
