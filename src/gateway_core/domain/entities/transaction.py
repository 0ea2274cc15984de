from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from gateway_core.domain.entities.payable import Product
    from gateway_core.domain.value_objects import Currency


@dataclass(frozen=True, slots=True)
class Transaction:
    """A charge already recorded by the caller.

    Read-only here: only ``processor_key`` (the processor's payment id) is
    used, to build a cancel request.
    """

    processor_key: str


@dataclass(slots=True)
class TransactionAttributes:
    """Caller input for a charge, checked by validate_transaction_fields().

    Fields are deliberately loosely typed: this is the raw input, and
    validation is what rejects a bad currency or installment count.
    ``paid_price=None`` means the caller did not set one.
    """

    products: Sequence[Product] = field(default_factory=list)
    currency: Currency | str | None = None
    installment: Any = None
    paid_price: Any = None
