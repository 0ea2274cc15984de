"""Data Transfer Objects exchanged with the payment gateway port.

Fragments are the sub-objects of a charge request. All are immutable and
built fresh for every call.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping
    from decimal import Decimal

SUCCESS_STATUS = "success"


@dataclass(frozen=True, slots=True)
class PaymentCardFragment:
    card_user_key: str
    card_token: str


@dataclass(frozen=True, slots=True)
class BuyerFragment:
    id: str
    name: str
    surname: str
    email: str
    gsm_number: str
    identity_number: str
    registration_address: str
    city: str
    country: str
    ip: str | None = None


@dataclass(frozen=True, slots=True)
class AddressFragment:
    contact_name: str
    country: str
    address: str
    city: str


@dataclass(frozen=True, slots=True)
class BasketItemFragment:
    id: str
    name: str
    category1: str
    price: Decimal
    item_type: str


@dataclass(frozen=True, slots=True)
class ChargeRequest:
    """Input for PaymentGateway.charge().

    ``price`` and ``paid_price`` are both the products total.
    """

    locale: str
    price: Decimal
    paid_price: Decimal
    currency: str
    installment: int
    payment_channel: str
    payment_group: str
    payment_card: PaymentCardFragment
    buyer: BuyerFragment
    shipping_address: AddressFragment
    billing_address: AddressFragment
    basket_items: tuple[BasketItemFragment, ...]


@dataclass(frozen=True, slots=True)
class CancelRequest:
    """Input for PaymentGateway.cancel()."""

    locale: str
    payment_id: str
    ip: str


@dataclass(frozen=True, slots=True)
class ProcessorResponse:
    """Processor answer to a charge or cancel request.

    ``raw`` keeps the full decoded payload for callers that need fields
    this package does not model (payment id, fraud status, ...).
    """

    status: str
    error_message: str | None = None
    error_code: str | None = None
    error_group: str | None = None
    raw: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return self.status == SUCCESS_STATUS
