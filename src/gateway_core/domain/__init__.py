"""Domain layer - Core business rules for charge and cancel requests.

This layer contains:
- Entities: Capabilities read from the caller (Payable, Product) and
  input records (CreditCard, Transaction, TransactionAttributes)
- Value Objects: Currencies and fixed processor codes
- Domain Services: Transaction field validation and total computation
- Domain Exceptions: Validation failures and processor outcomes

The domain layer has NO dependencies on external frameworks or infrastructure.
"""
