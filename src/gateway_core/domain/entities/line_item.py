from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from gateway_core.domain.value_objects import BasketItemType


@dataclass(frozen=True, slots=True)
class LineItem:
    """Ready-made Product implementation.

    Callers may pass their own product models instead; anything exposing
    key, name, category, item_type and price is accepted.
    """

    key: str
    name: str
    category: str
    price: Decimal
    item_type: str = BasketItemType.PHYSICAL.value

    def __post_init__(self) -> None:
        if not isinstance(self.price, Decimal):
            object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.price < 0:
            raise ValueError(f"LineItem price cannot be negative, got {self.price}")
