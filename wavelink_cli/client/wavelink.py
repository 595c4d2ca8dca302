"""JSON-RPC client for the Wave Link 3.0 remote-control interface."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any

import websockets

from wavelink_cli.client.transport import WebSocketTransport
from wavelink_cli.config.models import Settings
from wavelink_cli.exceptions import (
    RequestTimeoutError,
    WaveLinkConnectionError,
    WaveLinkRpcError,
)
from wavelink_cli.models import (
    ApplicationInfo,
    Channel,
    InputDevice,
    Mix,
    OutputDevicesState,
)

logger = logging.getLogger(__name__)

# Notifications tolerated while waiting for a single response
MAX_NOTIFICATIONS_TO_DISCARD = 1000

TransportFactory = Callable[[str], WebSocketTransport]


class WaveLinkClient:
    """Session with a locally running Wave Link application.

    The client connects to the first port of the configured range that
    accepts a WebSocket, then issues one request at a time and waits for the
    matching response. It never reconnects on its own.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        *,
        transport_factory: TransportFactory | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._transport_factory = transport_factory or self._default_transport
        self._transport: WebSocketTransport | None = None
        self._request_id = 0

    def _default_transport(self, url: str) -> WebSocketTransport:
        return WebSocketTransport(
            url,
            origin=self._settings.origin,
            open_timeout=self._settings.connect_timeout,
        )

    @property
    def is_connected(self) -> bool:
        return self._transport is not None

    async def connect(self) -> None:
        """Connect to the first port in the configured range that accepts.

        Raises:
            WaveLinkConnectionError: If no port accepts a connection
        """
        host = self._settings.host
        for port in self._settings.ports:
            url = f"ws://{host}:{port}"
            transport = self._transport_factory(url)
            try:
                await transport.connect()
            except (OSError, TimeoutError, websockets.exceptions.InvalidHandshake) as e:
                logger.debug("No Wave Link endpoint at %s: %s", url, e)
                continue
            logger.debug("Connected to Wave Link at %s", url)
            self._transport = transport
            return

        raise WaveLinkConnectionError(
            f"Could not connect to Wave Link on {host} "
            f"(ports {self._settings.port_start}-{self._settings.port_end}). Is Wave Link running?"
        )

    async def disconnect(self) -> None:
        if self._transport is None:
            return
        transport, self._transport = self._transport, None
        await transport.close()
        logger.debug("Disconnected from Wave Link")

    async def call(self, method: str, params: dict[str, Any] | None = None) -> Any:
        """Make a JSON-RPC call and wait for its response.

        Args:
            method: RPC method name.
            params: Method parameters. If None or empty, params field is omitted.

        Returns:
            The 'result' field from the response.

        Raises:
            WaveLinkRpcError: If Wave Link answers with an error.
            RequestTimeoutError: If no response arrives within the request timeout.
            WaveLinkConnectionError: If the session is not open or drops.
        """
        if self._transport is None:
            raise WaveLinkConnectionError("Not connected to Wave Link")

        self._request_id += 1
        expected_id = self._request_id
        request: dict[str, Any] = {
            "jsonrpc": "2.0",
            "id": expected_id,
            "method": method,
        }
        if params:
            request["params"] = params

        logger.debug("-> %s (id=%d)", method, expected_id)
        await self._transport.send(request)

        timeout = self._settings.request_timeout
        try:
            async with asyncio.timeout(timeout):
                response = await self._await_response(expected_id)
        except TimeoutError:
            raise RequestTimeoutError(method, timeout) from None

        if "error" in response and response["error"] is not None:
            error = response["error"]
            if isinstance(error, dict):
                raise WaveLinkRpcError(
                    error.get("message") or f"Wave Link rejected '{method}'",
                    code=error.get("code"),
                )
            raise WaveLinkRpcError(str(error))

        return response.get("result")

    async def _await_response(self, expected_id: int) -> dict[str, Any]:
        assert self._transport is not None
        notifications_discarded = 0
        while True:
            message = await self._transport.receive()
            if message.get("id") != expected_id:
                notifications_discarded += 1
                logger.debug("Discarded message while waiting for id=%d: %s",
                             expected_id, message.get("method", "<response>"))
                if notifications_discarded > MAX_NOTIFICATIONS_TO_DISCARD:
                    raise WaveLinkConnectionError(
                        f"Received too many unrelated messages while waiting for response {expected_id}"
                    )
                continue
            return message

    # Enumeration

    async def get_application_info(self) -> ApplicationInfo:
        return ApplicationInfo.model_validate(await self.call("getApplicationInfo"))

    async def get_mixes(self) -> list[Mix]:
        result = await self.call("getMixes") or {}
        return [Mix.model_validate(item) for item in result.get("mixes", [])]

    async def get_channels(self) -> list[Channel]:
        result = await self.call("getChannels") or {}
        return [Channel.model_validate(item) for item in result.get("channels", [])]

    async def get_output_devices(self) -> OutputDevicesState:
        return OutputDevicesState.model_validate(await self.call("getOutputDevices") or {})

    async def get_input_devices(self) -> list[InputDevice]:
        result = await self.call("getInputDevices") or {}
        return [InputDevice.model_validate(item) for item in result.get("inputDevices", [])]

    # Mixes

    async def set_mix_volume(self, mix_id: str, level: float) -> None:
        await self.call("setMix", {"mix": {"id": mix_id, "level": level}})

    async def set_mix_mute(self, mix_id: str, is_muted: bool) -> None:
        await self.call("setMix", {"mix": {"id": mix_id, "isMuted": is_muted}})

    # Channels

    async def set_channel_volume(self, channel_id: str, level: float) -> None:
        await self.call("setChannel", {"channel": {"id": channel_id, "level": level}})

    async def set_channel_mute(self, channel_id: str, is_muted: bool) -> None:
        await self.call("setChannel", {"channel": {"id": channel_id, "isMuted": is_muted}})

    async def set_channel_mix_volume(self, channel_id: str, mix_id: str, level: float) -> None:
        await self.call(
            "setChannel",
            {"channel": {"id": channel_id, "mixes": [{"id": mix_id, "level": level}]}},
        )

    async def set_channel_mix_mute(self, channel_id: str, mix_id: str, is_muted: bool) -> None:
        await self.call(
            "setChannel",
            {"channel": {"id": channel_id, "mixes": [{"id": mix_id, "isMuted": is_muted}]}},
        )

    # Outputs

    async def _set_output(self, device_id: str, output_id: str, **fields: Any) -> None:
        await self.call(
            "setOutputDevice",
            {"outputDevice": {"id": device_id, "outputs": [{"id": output_id, **fields}]}},
        )

    async def set_output_volume(self, device_id: str, output_id: str, level: float) -> None:
        await self._set_output(device_id, output_id, level=level)

    async def set_output_mute(self, device_id: str, output_id: str, is_muted: bool) -> None:
        await self._set_output(device_id, output_id, isMuted=is_muted)

    async def switch_output_mix(self, device_id: str, output_id: str, mix_id: str) -> None:
        await self._set_output(device_id, output_id, mixId=mix_id)

    async def remove_output_from_mix(self, device_id: str, output_id: str) -> None:
        await self._set_output(device_id, output_id, mixId="")

    # Inputs

    async def _set_input(self, device_id: str, input_id: str, **fields: Any) -> None:
        await self.call(
            "setInputDevice",
            {"inputDevice": {"id": device_id, "inputs": [{"id": input_id, **fields}]}},
        )

    async def set_input_gain(self, device_id: str, input_id: str, gain: float) -> None:
        await self._set_input(device_id, input_id, gain={"value": gain})

    async def set_input_mute(self, device_id: str, input_id: str, is_muted: bool) -> None:
        await self._set_input(device_id, input_id, isMuted=is_muted)
