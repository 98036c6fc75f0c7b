"""Domain model entities for finwise.

Each ledger entity has two shapes: a ``New*`` construction input that lacks
an identity, and a persisted entity carrying the integer identity assigned
by the store. Both are plain frozen data classes, independent of the
database schema.
"""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum


class PaymentMethod(str, Enum):
    """Closed set of payment methods a receipt may record."""

    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    CHECK = "check"
    WIRE_TRANSFER = "wire_transfer"


@dataclass(frozen=True)
class NewParty:
    """Party awaiting insertion."""

    name: str
    phone: str
    eban: str
    address_id: int


@dataclass(frozen=True)
class Party:
    """Party domain entity: anyone who can own accounts or move money."""

    id: int
    name: str
    phone: str
    eban: str
    address_id: int


@dataclass(frozen=True)
class NewAccount:
    """Account awaiting insertion."""

    party_id: int
    balance: Decimal


@dataclass(frozen=True)
class Account:
    """Balance-bearing ledger line owned by exactly one party."""

    id: int
    party_id: int
    balance: Decimal


@dataclass(frozen=True)
class NewTransaction:
    """Transaction awaiting insertion."""

    amount: Decimal
    from_party_id: int
    to_party_id: int
    timestamp: datetime


@dataclass(frozen=True)
class Transaction:
    """Journal record of a directed monetary movement between two parties."""

    id: int
    amount: Decimal
    from_party_id: int
    to_party_id: int
    timestamp: datetime


@dataclass(frozen=True)
class NewReceipt:
    """Receipt awaiting insertion."""

    payment_method: PaymentMethod
    party_id: int
    date: date
    time: time
    items: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Receipt:
    """Record of a payment event tied to one party."""

    id: int
    payment_method: PaymentMethod
    party_id: int
    date: date
    time: time
    items: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Transfer:
    """Outcome of an atomic transfer: the journal entry and both updated accounts."""

    transaction: Transaction
    from_account: Account
    to_account: Account
