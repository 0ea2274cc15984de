"""Domain services - Stateless operations on domain objects."""

from gateway_core.domain.services.transaction_fields import (
    to_decimal,
    total_price,
    validate_transaction_fields,
)

__all__ = [
    "to_decimal",
    "total_price",
    "validate_transaction_fields",
]
