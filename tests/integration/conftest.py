"""Integration test configuration and fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from pytest_mock import MockerFixture
from typer.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a CLI test runner."""
    return CliRunner()


@pytest.fixture
def cli_client(fake_client, mocker: MockerFixture, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Route every CLI session to the in-memory fake client.

    The working directory is switched to an empty temp dir so no local
    configuration file is picked up.
    """
    monkeypatch.chdir(tmp_path)
    factory = mocker.patch("wavelink_cli.cli.app.WaveLinkClient", side_effect=lambda settings: fake_client)
    fake_client.factory = factory
    return fake_client


def pytest_collection_modifyitems(items):
    """Automatically mark all tests in integration/ directory with @pytest.mark.integration."""
    for item in items:
        if "/integration/" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
