from __future__ import annotations

from enum import Enum

from gateway_core.domain.exceptions import InvalidTransactionFields


class Currency(Enum):
    """Currencies accepted for a charge.

    Member names are what callers pass; member values are the processor's
    wire codes (the Turkish lira is "TL" to callers but "TRY" on the wire).
    """

    TL = "TRY"
    EUR = "EUR"
    GBP = "GBP"
    IRR = "IRR"
    USD = "USD"

    @classmethod
    def parse(cls, value: Currency | str | None) -> Currency:
        """Resolve a Currency member or a member name.

        Raises:
            InvalidTransactionFields: If the value is missing or unsupported.
        """
        if isinstance(value, cls):
            return value
        if value is None:
            raise InvalidTransactionFields({"currency": "currency is required"})
        if isinstance(value, str) and value in cls.__members__:
            return cls[value]
        allowed = ", ".join(cls.__members__)
        raise InvalidTransactionFields({"currency": f"must be one of {allowed}, got {value!r}"})
