"""Domain layer for finwise application."""

from finwise.domain.entities import (
    Account,
    NewAccount,
    NewParty,
    NewReceipt,
    NewTransaction,
    Party,
    PaymentMethod,
    Receipt,
    Transaction,
    Transfer,
)
from finwise.domain.errors import (
    DependencyError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "Account",
    "NewAccount",
    "NewParty",
    "NewReceipt",
    "NewTransaction",
    "Party",
    "PaymentMethod",
    "Receipt",
    "Transaction",
    "Transfer",
    "DependencyError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
