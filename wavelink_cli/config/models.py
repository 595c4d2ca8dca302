"""Pydantic models for Wave Link CLI configuration."""

from typing import Self

from pydantic import BaseModel, ConfigDict, Field, model_validator

from wavelink_cli.config.defaults import (
    DEFAULT_CONNECT_TIMEOUT,
    DEFAULT_HOST,
    DEFAULT_ORIGIN,
    DEFAULT_PORT_END,
    DEFAULT_PORT_START,
    DEFAULT_REQUEST_TIMEOUT,
)


class Settings(BaseModel):
    """Connection settings for the Wave Link remote-control interface."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    host: str = Field(DEFAULT_HOST, min_length=1, description="Host running Wave Link")
    port_start: int = Field(DEFAULT_PORT_START, ge=1, le=65535, description="First port to try")
    port_end: int = Field(DEFAULT_PORT_END, ge=1, le=65535, description="Last port to try")
    connect_timeout: float = Field(DEFAULT_CONNECT_TIMEOUT, gt=0, description="Seconds per connection attempt")
    request_timeout: float = Field(DEFAULT_REQUEST_TIMEOUT, gt=0, description="Seconds to wait for a response")
    origin: str | None = Field(DEFAULT_ORIGIN, description="Origin header sent on the WebSocket handshake")

    @model_validator(mode="after")
    def validate_port_range(self) -> Self:
        if self.port_end < self.port_start:
            raise ValueError(
                f"port_end ({self.port_end}) must be greater than or equal to port_start ({self.port_start})"
            )
        return self

    @property
    def ports(self) -> range:
        """Ports to try, in order."""
        return range(self.port_start, self.port_end + 1)
