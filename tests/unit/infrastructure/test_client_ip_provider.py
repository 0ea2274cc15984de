import pytest

from gateway_core.application.ports import ClientIpProvider
from gateway_core.infrastructure.client_ip_provider import (
    CallableClientIpProvider,
    StaticClientIpProvider,
)


class TestStaticClientIpProvider:
    def test_implements_client_ip_provider_interface(self) -> None:
        assert isinstance(StaticClientIpProvider("127.0.0.1"), ClientIpProvider)

    def test_returns_configured_ip(self) -> None:
        assert StaticClientIpProvider(" 10.1.2.3 ").client_ip() == "10.1.2.3"

    def test_normalizes_ipv6(self) -> None:
        assert StaticClientIpProvider("2001:DB8::1").client_ip() == "2001:db8::1"

    def test_rejects_invalid_ip(self) -> None:
        with pytest.raises(ValueError):
            StaticClientIpProvider("not-an-ip")


class TestCallableClientIpProvider:
    def test_reads_ip_on_every_call(self) -> None:
        addresses = iter(["10.0.0.1", "10.0.0.2"])
        provider = CallableClientIpProvider(lambda: next(addresses))

        assert provider.client_ip() == "10.0.0.1"
        assert provider.client_ip() == "10.0.0.2"

    def test_rejects_invalid_ip(self) -> None:
        provider = CallableClientIpProvider(lambda: "999.1.1.1")

        with pytest.raises(ValueError):
            provider.client_ip()
