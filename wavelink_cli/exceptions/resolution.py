"""Identifier resolution exceptions for the Wave Link CLI."""

from wavelink_cli.exceptions.base import WaveLinkCliError


class EntityNotFoundError(WaveLinkCliError):
    """Raised when an ID or name matches no entity of the requested kind.

    Resolution happens before any mutation is issued, so no state has been
    changed when this is raised.
    """

    def __init__(self, kind: str, query: str) -> None:
        super().__init__(f"{kind} '{query}' not found")
        self.kind = kind
        self.query = query


class ChannelNotInMixError(WaveLinkCliError):
    """Raised when a channel exists but has no assignment for the given mix."""

    def __init__(self, channel_name: str, mix_name: str) -> None:
        super().__init__(f"Channel '{channel_name}' is not available in mix '{mix_name}'")
        self.channel_name = channel_name
        self.mix_name = mix_name
