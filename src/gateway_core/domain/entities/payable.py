"""Capabilities the core expects from the caller's domain objects.

The embedding application owns its buyer and product models; the core only
reads from them through these protocols.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Mapping
    from decimal import Decimal


@runtime_checkable
class Payable(Protocol):
    """Whoever is being charged.

    ``bill_fields`` must contain first_name, last_name, email,
    mobile_number, identity_number, processor_key, and the nested
    ``shipping_address`` and ``billing_address`` records, each holding
    country, address and city.
    """

    id: str

    @property
    def bill_fields(self) -> Mapping[str, Any]: ...


@runtime_checkable
class Product(Protocol):
    """Something that can be put in a basket and charged for."""

    key: str
    name: str
    category: str
    item_type: str
    price: Decimal | int | float
