"""Validation of charge attributes before any request is built.

Rules:
    - products: non-empty, every entry satisfies the Product protocol
      with a non-negative numeric price
    - installment: required, numeric, a whole number of at least 1
    - currency: required, one of Currency's members
    - paid_price: optional; when set, numeric and not above the total

The total is the sum of product prices in input order. total_price() is the
only place it is computed, so the validated total and the charged total
cannot drift apart.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from gateway_core.domain.entities.payable import Product
from gateway_core.domain.exceptions import InvalidTransactionFields
from gateway_core.domain.value_objects import Currency

if TYPE_CHECKING:
    from collections.abc import Iterable

    from gateway_core.domain.entities import TransactionAttributes


def to_decimal(value: Any) -> Decimal | None:
    """Return value as a finite Decimal, or None if it is not numeric.

    Numeric strings count as numeric; booleans do not.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
    elif not isinstance(value, (int, float, Decimal)):
        return None
    try:
        number = Decimal(str(value))
    except InvalidOperation:
        return None
    return number if number.is_finite() else None


def total_price(products: Iterable[Product]) -> Decimal:
    """Sum product prices in input order."""
    return sum((Decimal(str(product.price)) for product in products), Decimal("0"))


def validate_transaction_fields(attributes: TransactionAttributes) -> None:
    """Check charge attributes against the business rules.

    Raises:
        InvalidTransactionFields: With every failing field in ``errors``.
    """
    errors: dict[str, str] = {}

    products = list(attributes.products or [])
    products_valid = _check_products(products, errors)

    installment = to_decimal(attributes.installment)
    if attributes.installment is None:
        errors["installment"] = "installment is required"
    elif installment is None:
        errors["installment"] = f"must be numeric, got {attributes.installment!r}"
    elif installment < 1:
        errors["installment"] = f"must be at least 1, got {attributes.installment!r}"
    elif installment != installment.to_integral_value():
        errors["installment"] = f"must be a whole number, got {attributes.installment!r}"

    try:
        Currency.parse(attributes.currency)
    except InvalidTransactionFields as e:
        errors.update(e.errors)

    if attributes.paid_price is not None:
        paid_price = to_decimal(attributes.paid_price)
        if paid_price is None:
            errors["paid_price"] = f"must be numeric, got {attributes.paid_price!r}"
        elif products_valid:
            total = total_price(products)
            if paid_price > total:
                errors["paid_price"] = f"cannot exceed the products total {total}, got {paid_price}"

    if errors:
        raise InvalidTransactionFields(errors)


def _check_products(products: list[Any], errors: dict[str, str]) -> bool:
    if not products:
        errors["products"] = "at least one product is required"
        return False

    for index, product in enumerate(products):
        if not isinstance(product, Product):
            errors["products"] = f"item {index} is not a product: {product!r}"
            return False
        price = to_decimal(product.price)
        if price is None or price < 0:
            errors["products"] = f"item {index} has an invalid price: {product.price!r}"
            return False

    return True
