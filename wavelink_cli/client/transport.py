"""WebSocket transport carrying JSON-RPC messages to Wave Link."""

from __future__ import annotations

import json
import logging
from typing import Any

import websockets
from websockets.asyncio.client import ClientConnection, connect

from wavelink_cli.exceptions import WaveLinkConnectionError

logger = logging.getLogger(__name__)


class WebSocketTransport:
    """Single WebSocket connection exchanging JSON text frames."""

    def __init__(self, url: str, *, origin: str | None = None, open_timeout: float = 2.0) -> None:
        self._url = url
        self._origin = origin
        self._open_timeout = open_timeout
        self._ws: ClientConnection | None = None

    async def connect(self) -> None:
        # Use await directly (NOT async with) since lifecycle is managed by connect/close
        self._ws = await connect(
            self._url,
            origin=self._origin,
            open_timeout=self._open_timeout,
            ping_interval=None,
        )

    async def send(self, message: dict[str, Any]) -> None:
        ws = self._require_connection()
        try:
            await ws.send(json.dumps(message, separators=(",", ":")))
        except websockets.exceptions.ConnectionClosed as e:
            raise WaveLinkConnectionError("Connection to Wave Link was closed") from e

    async def receive(self) -> dict[str, Any]:
        ws = self._require_connection()
        while True:
            try:
                data = await ws.recv()
            except websockets.exceptions.ConnectionClosed as e:
                raise WaveLinkConnectionError("Connection to Wave Link was closed") from e
            try:
                message = json.loads(data)
            except json.JSONDecodeError:
                logger.debug("Ignoring non-JSON frame from %s", self._url)
                continue
            if isinstance(message, dict):
                return message
            logger.debug("Ignoring non-object message from %s", self._url)

    async def close(self) -> None:
        if self._ws is not None:
            await self._ws.close()
            self._ws = None

    @property
    def is_connected(self) -> bool:
        return self._ws is not None

    def _require_connection(self) -> ClientConnection:
        if self._ws is None:
            raise WaveLinkConnectionError("Not connected to Wave Link")
        return self._ws
