"""Value objects - Immutable objects defined by their attributes."""

from gateway_core.domain.value_objects.codes import (
    AddressType,
    BasketItemType,
    Locale,
    PaymentChannel,
    PaymentGroup,
)
from gateway_core.domain.value_objects.currency import Currency

__all__ = [
    "AddressType",
    "BasketItemType",
    "Currency",
    "Locale",
    "PaymentChannel",
    "PaymentGroup",
]
