"""Domain entities - Objects the core reads when building requests."""

from gateway_core.domain.entities.credit_card import CreditCard
from gateway_core.domain.entities.line_item import LineItem
from gateway_core.domain.entities.payable import Payable, Product
from gateway_core.domain.entities.transaction import Transaction, TransactionAttributes

__all__ = [
    "CreditCard",
    "LineItem",
    "Payable",
    "Product",
    "Transaction",
    "TransactionAttributes",
]
