"""Shared pytest fixtures for the test suite."""

from __future__ import annotations

import copy
from collections.abc import Callable
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

import pytest

from gateway_core.application.config import ConnectionOptions, GatewayConfig
from gateway_core.domain.entities import CreditCard, LineItem, TransactionAttributes
from gateway_core.infrastructure.client_ip_provider import StaticClientIpProvider
from gateway_core.infrastructure.stub_gateway import StubPaymentGateway

BILL_FIELDS: dict[str, Any] = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "email": "a@x.com",
    "mobile_number": "+1",
    "identity_number": "123",
    "processor_key": "pk1",
    "billing_address": {"country": "TR", "address": "A St", "city": "Ankara"},
    "shipping_address": {"country": "TR", "address": "B St", "city": "Istanbul"},
}


@dataclass
class Customer:
    """Minimal Payable implementation."""

    id: str
    bill_fields: dict[str, Any] = field(default_factory=dict)


@pytest.fixture
def make_payable() -> Callable[..., Customer]:
    """Build a Customer, overriding top-level bill fields by keyword."""

    def _make(payable_id: str = "customer-1", **overrides: Any) -> Customer:
        bill_fields = copy.deepcopy(BILL_FIELDS)
        bill_fields.update(overrides)
        return Customer(id=payable_id, bill_fields=bill_fields)

    return _make


@pytest.fixture
def payable(make_payable: Callable[..., Customer]) -> Customer:
    return make_payable()


@pytest.fixture
def credit_card() -> CreditCard:
    return CreditCard(token="tok1")


@pytest.fixture
def product() -> LineItem:
    return LineItem(key="sku-1", name="Notebook", category="Stationery", price=Decimal("100"))


@pytest.fixture
def attributes(product: LineItem) -> TransactionAttributes:
    return TransactionAttributes(
        products=[product],
        currency="TL",
        installment=1,
        paid_price=100,
    )


@pytest.fixture
def config() -> GatewayConfig:
    return GatewayConfig(
        locale="tr",
        options=ConnectionOptions(
            api_key="api-key",
            secret_key="secret-key",
            base_url="sandbox-api.iyzipay.com",
        ),
    )


@pytest.fixture
def ip_provider() -> StaticClientIpProvider:
    return StaticClientIpProvider("85.34.78.112")


@pytest.fixture
def gateway() -> StubPaymentGateway:
    return StubPaymentGateway()
