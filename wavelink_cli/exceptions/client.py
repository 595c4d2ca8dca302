"""Exceptions raised by the Wave Link client session."""

from wavelink_cli.exceptions.base import WaveLinkCliError


class WaveLinkConnectionError(WaveLinkCliError):
    """Raised when no session can be established or the socket drops."""


class WaveLinkRpcError(WaveLinkCliError):
    """Error response returned by the Wave Link application.

    Attributes:
        code: JSON-RPC error code, if the application sent one.
    """

    def __init__(self, message: str, code: int | None = None) -> None:
        super().__init__(message)
        self.code = code


class RequestTimeoutError(WaveLinkCliError):
    """Raised when a response does not arrive within the request timeout."""

    def __init__(self, method: str, timeout: float) -> None:
        super().__init__(f"Wave Link did not answer '{method}' within {timeout:g}s")
        self.method = method
        self.timeout = timeout
