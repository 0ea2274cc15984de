from __future__ import annotations

from collections.abc import Callable
from ipaddress import ip_address

from gateway_core.application.ports import ClientIpProvider


class StaticClientIpProvider(ClientIpProvider):
    """Always reports the same address.

    Suitable for back-office jobs acting on the server's own behalf and
    for tests.
    """

    def __init__(self, ip: str) -> None:
        self._ip = _validate_ip(ip)

    def client_ip(self) -> str:
        return self._ip


class CallableClientIpProvider(ClientIpProvider):
    """Reads the address from a callable, typically bound to the web request.

    Example:
        CallableClientIpProvider(lambda: request.client.host)
    """

    def __init__(self, lookup: Callable[[], str]) -> None:
        self._lookup = lookup

    def client_ip(self) -> str:
        return _validate_ip(self._lookup())


def _validate_ip(ip: str) -> str:
    # Raises ValueError for anything that is not an IPv4/IPv6 address
    return str(ip_address(ip.strip()))
