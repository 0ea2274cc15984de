"""Configuration handed to the use cases by the embedding application."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ConnectionOptions:
    """Credentials and endpoint for the processor client."""

    api_key: str
    secret_key: str
    base_url: str

    def __repr__(self) -> str:
        return f"ConnectionOptions(api_key='***', secret_key='***', base_url={self.base_url!r})"


@dataclass(frozen=True, slots=True)
class GatewayConfig:
    """Per-deployment settings read by both use cases."""

    locale: str
    options: ConnectionOptions
