"""Composition root: wires settings and adapters into the use cases."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gateway_core.application.use_cases import CancelPaymentUseCase, ChargePaymentUseCase
from gateway_core.infrastructure.client_ip_provider import StaticClientIpProvider
from gateway_core.infrastructure.iyzipay_gateway import IyzipayPaymentGateway
from gateway_core.infrastructure.logging import configure_logging

if TYPE_CHECKING:
    from gateway_core.application.ports import ClientIpProvider, PaymentGateway
    from gateway_core.infrastructure.settings import GatewaySettings


def setup_logging(settings: GatewaySettings, service_name: str = "gateway-core") -> None:
    """Install JSON logging at ``settings.log_level``; call once at process startup."""
    configure_logging(level=settings.log_level, service_name=service_name)


def build_charge_use_case(
    settings: GatewaySettings,
    gateway: PaymentGateway | None = None,
    ip_provider: ClientIpProvider | None = None,
) -> ChargePaymentUseCase:
    return ChargePaymentUseCase(
        gateway=gateway or IyzipayPaymentGateway(),
        config=settings.to_gateway_config(),
        ip_provider=ip_provider,
    )


def build_cancel_use_case(
    settings: GatewaySettings,
    gateway: PaymentGateway | None = None,
    ip_provider: ClientIpProvider | None = None,
) -> CancelPaymentUseCase:
    """Build the cancel use case.

    Without an explicit provider, the client IP is ``settings.client_ip``.
    """
    return CancelPaymentUseCase(
        gateway=gateway or IyzipayPaymentGateway(),
        config=settings.to_gateway_config(),
        ip_provider=ip_provider or StaticClientIpProvider(settings.client_ip),
    )
