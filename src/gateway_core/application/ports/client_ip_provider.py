from __future__ import annotations

from abc import ABC, abstractmethod


class ClientIpProvider(ABC):
    """Port for the network address of the client behind the current request.

    The processor requires it on cancel requests. Web applications
    typically implement this from their request context.
    """

    @abstractmethod
    def client_ip(self) -> str:
        """Return the client's IP address as a string."""
        ...
