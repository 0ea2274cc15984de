"""Ports - Abstract interfaces for external dependencies.

Ports define the contracts that infrastructure adapters must implement.
This allows the application layer to remain decoupled from concrete implementations.
"""

from gateway_core.application.ports.client_ip_provider import ClientIpProvider
from gateway_core.application.ports.payment_gateway import PaymentGateway

__all__ = [
    "ClientIpProvider",
    "PaymentGateway",
]
