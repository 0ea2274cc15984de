"""Domain exceptions for gateway-core.

Exception hierarchy:
    DomainException (base)
    ├── Validation Errors
    │   └── InvalidTransactionFields
    └── Processor Errors
        └── TransactionException
            ├── TransactionSaveException (charge)
            └── TransactionVoidException (cancel)

Validation errors are raised before any processor call. Processor errors are
raised at the single gateway call site of each use case.
"""

from __future__ import annotations

from collections.abc import Mapping


class DomainException(Exception):
    """Base exception for all domain-level errors.

    All domain exceptions inherit from this class to enable
    catching domain errors distinctly from infrastructure errors.
    """


# =============================================================================
# Validation Errors
# =============================================================================


class InvalidTransactionFields(DomainException):
    """Raised when transaction attributes fail validation.

    Covers bad products, an empty product list, a missing or unsupported
    currency, a missing or invalid installment count, and a paid price
    that exceeds the products' total.

    The failing fields are available on ``errors`` as a field -> message
    mapping. This is always a client error: fix the input and retry.
    """

    def __init__(self, errors: Mapping[str, str] | None = None) -> None:
        self.errors: dict[str, str] = dict(errors or {})
        if self.errors:
            detail = "; ".join(f"{field}: {message}" for field, message in self.errors.items())
            super().__init__(f"Invalid transaction fields ({detail})")
        else:
            super().__init__("Invalid transaction fields")


# =============================================================================
# Processor Errors
# =============================================================================


class TransactionException(DomainException):
    """Base for failures at the payment processor boundary.

    Two cases share this shape:
        - transport failure: the gateway raised; the message is generic and
          the original exception is chained as ``__cause__``
        - business rejection: the processor answered with a non-success
          status; the message is the processor's error message
    """

    default_message = "Transaction failed"

    def __init__(self, message: str | None = None, error_code: str | None = None) -> None:
        self.error_code = error_code
        super().__init__(message or self.default_message)


class TransactionSaveException(TransactionException):
    """Raised when a charge could not be created on the processor."""

    default_message = "Transaction could not be saved"


class TransactionVoidException(TransactionException):
    """Raised when a charge could not be cancelled on the processor."""

    default_message = "Transaction could not be voided"
