"""Built-in connection defaults for the Wave Link CLI."""

from typing import Any

DEFAULT_HOST = "127.0.0.1"
# Wave Link listens on the first free port of this range.
DEFAULT_PORT_START = 1824
DEFAULT_PORT_END = 1833
DEFAULT_CONNECT_TIMEOUT = 2.0
DEFAULT_REQUEST_TIMEOUT = 5.0
DEFAULT_ORIGIN = "streamdeck://"


class DefaultConfigSource:
    """Configuration source backed by the built-in defaults."""

    @property
    def source_description(self) -> str:
        return "built-in defaults"

    def load(self) -> tuple[dict[str, Any], int]:
        return {}, 1
