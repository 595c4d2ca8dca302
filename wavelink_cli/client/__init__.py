"""Wave Link client session."""
from wavelink_cli.client.protocols import WaveLinkApi
from wavelink_cli.client.transport import WebSocketTransport
from wavelink_cli.client.wavelink import WaveLinkClient

__all__ = [
    "WaveLinkApi",
    "WebSocketTransport",
    "WaveLinkClient",
]
