"""Abstract ledger repository interface."""

from abc import ABC, abstractmethod
from datetime import date, datetime, time
from decimal import Decimal
from typing import Iterable, Optional

# Import entities directly to avoid circular import through domain/__init__.py
from finwise.domain.entities import (
    Account,
    Party,
    PaymentMethod,
    Receipt,
    Transaction,
    Transfer,
)

Money = Decimal | int | str


class LedgerRepository(ABC):
    """Invariant-preserving CRUD over parties, accounts, transactions and receipts.

    Every operation runs as one store-level transaction on one pooled
    connection. Mutations validate their input before anything is written.
    """

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""

    # Party operations
    @abstractmethod
    def create_party(self, name: str, phone: str, eban: str, address_id: int) -> Party:
        """Create a party. All strings must be non-empty."""

    @abstractmethod
    def get_party(self, party_id: int) -> Optional[Party]:
        """Get party by ID."""

    @abstractmethod
    def delete_party(self, party_id: int) -> int:
        """Delete a party that nothing references. Returns rows deleted."""

    # Account operations
    @abstractmethod
    def create_account(self, party_id: int, initial_balance: Money) -> Account:
        """Create an account with a non-negative opening balance."""

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""

    @abstractmethod
    def list_accounts(self, party_id: Optional[int] = None) -> list[Account]:
        """List accounts, optionally filtered by owning party."""

    @abstractmethod
    def update_balance(self, account_id: int, new_balance: Money) -> int:
        """Overwrite an account balance. Returns rows updated."""

    @abstractmethod
    def total_balance_for_party(self, party_id: int) -> Decimal:
        """Sum of a party's account balances; Decimal zero when it has none."""

    @abstractmethod
    def delete_account(self, account_id: int) -> int:
        """Delete an account. Returns rows deleted."""

    # Transaction operations
    @abstractmethod
    def create_transaction(
        self,
        amount: Money,
        from_party_id: int,
        to_party_id: int,
        when: Optional[datetime] = None,
    ) -> Transaction:
        """Record a journal entry. Does not touch any account balance."""

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""

    @abstractmethod
    def list_transactions(self, party_id: Optional[int] = None) -> list[Transaction]:
        """List transactions, optionally those where the party is either side."""

    @abstractmethod
    def delete_transaction(self, transaction_id: int) -> int:
        """Delete a transaction. Returns rows deleted."""

    @abstractmethod
    def transfer(
        self,
        from_account_id: int,
        to_account_id: int,
        amount: Money,
        when: Optional[datetime] = None,
    ) -> Transfer:
        """Journal a movement and apply both balance changes atomically."""

    # Receipt operations
    @abstractmethod
    def create_receipt(
        self,
        payment_method: PaymentMethod | str,
        party_id: int,
        receipt_date: date,
        receipt_time: time,
        items: Optional[Iterable[str]] = None,
    ) -> Receipt:
        """Create a receipt with an ordered, possibly empty, item list."""

    @abstractmethod
    def get_receipt(self, receipt_id: int) -> Optional[Receipt]:
        """Get receipt by ID."""

    @abstractmethod
    def list_receipts(self, party_id: Optional[int] = None) -> list[Receipt]:
        """List receipts, optionally filtered by party."""

    @abstractmethod
    def delete_receipt(self, receipt_id: int) -> int:
        """Delete a receipt. Returns rows deleted."""
