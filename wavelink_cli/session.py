"""Connection scope and the terminal error boundary for one CLI command."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from contextlib import asynccontextmanager, contextmanager
from pathlib import Path
from typing import TypeVar

import typer

from wavelink_cli.client import WaveLinkApi, WaveLinkClient
from wavelink_cli.config import Settings, load_settings
from wavelink_cli.exceptions import WaveLinkCliError
from wavelink_cli.output import OutputHandler

logger = logging.getLogger(__name__)

T = TypeVar("T")

ClientFactory = Callable[[Settings], WaveLinkApi]
Action = Callable[[WaveLinkApi], Awaitable[T]]


@asynccontextmanager
async def open_session(
    settings: Settings,
    console: OutputHandler,
    client_factory: ClientFactory = WaveLinkClient,
) -> AsyncIterator[WaveLinkApi]:
    """Open a client session and disconnect it on every exit path.

    A failing disconnect is logged and never replaces the outcome of the
    command itself.
    """
    client = client_factory(settings)
    try:
        console.info("Connecting to Wave Link...")
        await client.connect()
        console.info("Connected successfully")
        yield client
    finally:
        try:
            await client.disconnect()
        except Exception:
            logger.debug("Disconnect failed", exc_info=True)


class CommandRunner:
    """Run one command's action inside a session and report any failure.

    ``reporting()`` is the only place a failure becomes an ``Error:`` line
    and a non-zero exit status. Settings are loaded on the first ``run()``
    so that help output never depends on the configuration file.
    """

    def __init__(
        self,
        console: OutputHandler,
        client_factory: ClientFactory = WaveLinkClient,
        *,
        settings: Settings | None = None,
        config_path: Path | None = None,
    ) -> None:
        self.console = console
        self.client_factory = client_factory
        self.config_path = config_path
        self._settings = settings

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = load_settings(self.config_path)
        return self._settings

    @contextmanager
    def reporting(self) -> Iterator[None]:
        try:
            yield
        except typer.Exit:
            raise
        except WaveLinkCliError as e:
            logger.debug("Command failed", exc_info=True)
            self.console.error(str(e))
            raise typer.Exit(code=1)
        except Exception as e:
            logger.debug("Unexpected failure", exc_info=True)
            self.console.error(str(e) or "An unexpected error occurred")
            raise typer.Exit(code=1)

    def run(self, action: Action[T]) -> T:
        with self.reporting():
            settings = self.settings
            return asyncio.run(self._run_in_session(settings, action))

    async def _run_in_session(self, settings: Settings, action: Action[T]) -> T:
        async with open_session(settings, self.console, self.client_factory) as client:
            return await action(client)
