"""Charge and cancel requests for the iyzipay payment processor."""

from gateway_core.application.config import ConnectionOptions, GatewayConfig
from gateway_core.application.dtos import ProcessorResponse
from gateway_core.application.use_cases import CancelPaymentUseCase, ChargePaymentUseCase
from gateway_core.domain.entities import (
    CreditCard,
    LineItem,
    Payable,
    Product,
    Transaction,
    TransactionAttributes,
)
from gateway_core.domain.exceptions import (
    InvalidTransactionFields,
    TransactionSaveException,
    TransactionVoidException,
)
from gateway_core.domain.value_objects import Currency

__all__ = [
    "CancelPaymentUseCase",
    "ChargePaymentUseCase",
    "ConnectionOptions",
    "CreditCard",
    "Currency",
    "GatewayConfig",
    "InvalidTransactionFields",
    "LineItem",
    "Payable",
    "ProcessorResponse",
    "Product",
    "Transaction",
    "TransactionAttributes",
    "TransactionSaveException",
    "TransactionVoidException",
]
