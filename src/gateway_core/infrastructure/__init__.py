"""Infrastructure layer - Concrete implementations of ports.

This layer contains:
- Gateways: The iyzipay SDK adapter and an in-memory stub
- Client IP: Static and callable-backed providers
- Settings: Environment-driven connection settings
- Logging: JSON log configuration

Infrastructure adapters implement the ports defined in the application layer.
"""

from gateway_core.infrastructure.client_ip_provider import (
    CallableClientIpProvider,
    StaticClientIpProvider,
)
from gateway_core.infrastructure.iyzipay_gateway import IyzipayPaymentGateway
from gateway_core.infrastructure.stub_gateway import StubPaymentGateway

__all__ = [
    "CallableClientIpProvider",
    "IyzipayPaymentGateway",
    "StaticClientIpProvider",
    "StubPaymentGateway",
]
