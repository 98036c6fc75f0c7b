"""SQLAlchemy implementation of the ledger repository."""

from contextlib import contextmanager
from datetime import UTC, date, datetime, time
from decimal import Decimal
import logging
from typing import Iterable, Iterator, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from finwise.database.base import LedgerRepository, Money
from finwise.database.mappers import (
    account_to_domain,
    new_account_to_orm,
    new_party_to_orm,
    new_receipt_to_orm,
    new_transaction_to_orm,
    party_to_domain,
    receipt_to_domain,
    transaction_to_domain,
)
from finwise.database.models import Account, Base, Party, Receipt, Transaction
from finwise.database.pool import ConnectionPool
from finwise.domain import entities as domain
from finwise.domain.money import exact_add, exact_subtract, exact_sum
from finwise.domain.errors import (
    DependencyError,
    NotFoundError,
    ValidationError,
    account_not_found,
    insufficient_funds,
    party_delete_blocked,
    party_not_found,
)
from finwise.domain.validation import (
    normalize_items,
    parse_payment_method,
    require_distinct_parties,
    require_non_negative_balance,
    require_positive_amount,
    require_receipt_moment,
    require_text,
)

logger = logging.getLogger(__name__)


def _naive_utc(when: Optional[datetime]) -> datetime:
    """Normalize a timestamp to naive UTC, defaulting to now."""
    if when is None:
        return datetime.now(UTC).replace(tzinfo=None)
    if not isinstance(when, datetime):
        raise ValidationError("Transaction timestamp must be a datetime")
    if when.tzinfo is not None:
        return when.astimezone(UTC).replace(tzinfo=None)
    return when


def _require_id(value: int, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field_name} must be an integer")
    return value


class SQLAlchemyLedgerRepository(LedgerRepository):
    """LedgerRepository backed by a ConnectionPool.

    Each call checks out one connection, runs inside one transaction and
    returns the connection before returning. Works against PostgreSQL and
    SQLite.
    """

    def __init__(self, pool: ConnectionPool):
        """Initialize the repository.

        Args:
            pool: Pool that every operation borrows a connection from
        """
        self.pool = pool

    @contextmanager
    def _session(self) -> Iterator[Session]:
        """Yield a session committed on success and rolled back on error."""
        with self.pool.checkout() as connection:
            with Session(bind=connection, expire_on_commit=False) as session:
                with session.begin():
                    yield session

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        with self.pool.checkout() as connection:
            with connection.begin():
                Base.metadata.create_all(connection)

    @staticmethod
    def _require_party(session: Session, party_id: int) -> Party:
        party = session.get(Party, party_id)
        if party is None:
            raise NotFoundError(party_not_found(party_id))
        return party

    # Party operations
    def create_party(self, name: str, phone: str, eban: str, address_id: int) -> domain.Party:
        """Create a party.

        Raises:
            ValidationError: If name, phone or eban is empty
        """
        new_party = domain.NewParty(
            name=require_text(name, "name"),
            phone=require_text(phone, "phone"),
            eban=require_text(eban, "eban"),
            address_id=_require_id(address_id, "address_id"),
        )
        with self._session() as session:
            party = new_party_to_orm(new_party)
            session.add(party)
            session.flush()
            logger.debug("Created party %d", party.id)
            return party_to_domain(party)

    def get_party(self, party_id: int) -> Optional[domain.Party]:
        """Get party by ID."""
        with self._session() as session:
            party = session.get(Party, party_id)
            if party is None:
                return None
            return party_to_domain(party)

    def delete_party(self, party_id: int) -> int:
        """Delete a party.

        Deletion is restricted: a party still referenced by accounts,
        transactions or receipts is not deleted.

        Returns:
            Number of rows deleted (0 if the party does not exist)

        Raises:
            DependencyError: If any row still references the party
        """
        with self._session() as session:
            account_count = session.query(Account).filter(Account.party_id == party_id).count()
            transaction_count = (
                session.query(Transaction)
                .filter(
                    or_(
                        Transaction.from_party_id == party_id,
                        Transaction.to_party_id == party_id,
                    )
                )
                .count()
            )
            receipt_count = session.query(Receipt).filter(Receipt.party_id == party_id).count()

            if account_count or transaction_count or receipt_count:
                raise DependencyError(
                    party_delete_blocked(party_id, account_count, transaction_count, receipt_count)
                )

            deleted = (
                session.query(Party)
                .filter(Party.id == party_id)
                .delete(synchronize_session=False)
            )
            logger.debug("Deleted %d party row(s) for id %d", deleted, party_id)
            return deleted

    # Account operations
    def create_account(self, party_id: int, initial_balance: Money) -> domain.Account:
        """Create an account.

        Raises:
            ValidationError: If the opening balance is negative
            NotFoundError: If the owning party does not exist
        """
        new_account = domain.NewAccount(
            party_id=_require_id(party_id, "party_id"),
            balance=require_non_negative_balance(initial_balance),
        )
        with self._session() as session:
            self._require_party(session, party_id)
            account = new_account_to_orm(new_account)
            session.add(account)
            session.flush()
            logger.debug("Created account %d for party %d", account.id, party_id)
            return account_to_domain(account)

    def get_account(self, account_id: int) -> Optional[domain.Account]:
        """Get account by ID."""
        with self._session() as session:
            account = session.get(Account, account_id)
            if account is None:
                return None
            return account_to_domain(account)

    def list_accounts(self, party_id: Optional[int] = None) -> list[domain.Account]:
        """List accounts, optionally filtered by owning party."""
        with self._session() as session:
            query = session.query(Account)
            if party_id is not None:
                query = query.filter(Account.party_id == party_id)
            return [account_to_domain(acc) for acc in query.order_by(Account.id).all()]

    def update_balance(self, account_id: int, new_balance: Money) -> int:
        """Overwrite an account's balance.

        Returns:
            Number of rows updated

        Raises:
            ValidationError: If the new balance is negative
            NotFoundError: If the account does not exist
        """
        balance = require_non_negative_balance(new_balance)
        with self._session() as session:
            updated = (
                session.query(Account)
                .filter(Account.id == account_id)
                .update({Account.balance: balance}, synchronize_session=False)
            )
            if updated == 0:
                raise NotFoundError(account_not_found(account_id))
            logger.debug("Set balance of account %d", account_id)
            return updated

    def total_balance_for_party(self, party_id: int) -> Decimal:
        """Sum a party's account balances.

        Summed in Python without rounding, so SQLite's string storage stays exact.
        """
        with self._session() as session:
            balances = session.query(Account.balance).filter(Account.party_id == party_id).all()
            return exact_sum(row.balance for row in balances)

    def delete_account(self, account_id: int) -> int:
        with self._session() as session:
            return (
                session.query(Account)
                .filter(Account.id == account_id)
                .delete(synchronize_session=False)
            )

    # Transaction operations
    def create_transaction(
        self,
        amount: Money,
        from_party_id: int,
        to_party_id: int,
        when: Optional[datetime] = None,
    ) -> domain.Transaction:
        """Record a journal entry between two parties.

        Account balances are not changed; use ``transfer`` for that.

        Raises:
            ValidationError: If amount <= 0 or both parties are the same
            NotFoundError: If either party does not exist
        """
        new_transaction = domain.NewTransaction(
            amount=require_positive_amount(amount),
            from_party_id=_require_id(from_party_id, "from_party_id"),
            to_party_id=_require_id(to_party_id, "to_party_id"),
            timestamp=_naive_utc(when),
        )
        require_distinct_parties(from_party_id, to_party_id)
        with self._session() as session:
            self._require_party(session, from_party_id)
            self._require_party(session, to_party_id)
            transaction = new_transaction_to_orm(new_transaction)
            session.add(transaction)
            session.flush()
            logger.debug(
                "Recorded transaction %d from party %d to party %d",
                transaction.id,
                from_party_id,
                to_party_id,
            )
            return transaction_to_domain(transaction)

    def get_transaction(self, transaction_id: int) -> Optional[domain.Transaction]:
        """Get transaction by ID."""
        with self._session() as session:
            transaction = session.get(Transaction, transaction_id)
            if transaction is None:
                return None
            return transaction_to_domain(transaction)

    def list_transactions(self, party_id: Optional[int] = None) -> list[domain.Transaction]:
        """List transactions, oldest first.

        Args:
            party_id: If given, only transactions where the party is sender or receiver
        """
        with self._session() as session:
            query = session.query(Transaction)
            if party_id is not None:
                query = query.filter(
                    or_(
                        Transaction.from_party_id == party_id,
                        Transaction.to_party_id == party_id,
                    )
                )
            transactions = query.order_by(Transaction.date, Transaction.id).all()
            return [transaction_to_domain(txn) for txn in transactions]

    def delete_transaction(self, transaction_id: int) -> int:
        with self._session() as session:
            return (
                session.query(Transaction)
                .filter(Transaction.id == transaction_id)
                .delete(synchronize_session=False)
            )

    def transfer(
        self,
        from_account_id: int,
        to_account_id: int,
        amount: Money,
        when: Optional[datetime] = None,
    ) -> domain.Transfer:
        """Move money between accounts of two different parties.

        Writes the journal entry and both balance changes in one transaction;
        on any failure nothing is written.

        Raises:
            ValidationError: If amount <= 0, the accounts share an owner, or
                the source balance would go negative
            NotFoundError: If either account does not exist
        """
        amount = require_positive_amount(amount)
        timestamp = _naive_utc(when)
        if from_account_id == to_account_id:
            raise ValidationError(f"Cannot transfer from account {from_account_id} to itself")

        with self._session() as session:
            # Lock both rows in id order so concurrent transfers cannot deadlock
            locked = {
                account.id: account
                for account in session.query(Account)
                .filter(Account.id.in_([from_account_id, to_account_id]))
                .order_by(Account.id)
                .with_for_update()
                .all()
            }
            for account_id in (from_account_id, to_account_id):
                if account_id not in locked:
                    raise NotFoundError(account_not_found(account_id))
            source = locked[from_account_id]
            target = locked[to_account_id]

            require_distinct_parties(source.party_id, target.party_id)
            remaining = exact_subtract(source.balance, amount)
            if remaining < 0:
                raise ValidationError(insufficient_funds(source.id, source.balance, amount))

            transaction = new_transaction_to_orm(
                domain.NewTransaction(
                    amount=amount,
                    from_party_id=source.party_id,
                    to_party_id=target.party_id,
                    timestamp=timestamp,
                )
            )
            session.add(transaction)
            source.balance = remaining
            target.balance = exact_add(target.balance, amount)
            session.flush()
            logger.info(
                "Transferred between accounts %d and %d (transaction %d)",
                source.id,
                target.id,
                transaction.id,
            )
            return domain.Transfer(
                transaction=transaction_to_domain(transaction),
                from_account=account_to_domain(source),
                to_account=account_to_domain(target),
            )

    # Receipt operations
    def create_receipt(
        self,
        payment_method: domain.PaymentMethod | str,
        party_id: int,
        receipt_date: date,
        receipt_time: time,
        items: Optional[Iterable[str]] = None,
    ) -> domain.Receipt:
        """Create a receipt.

        Raises:
            ValidationError: If the payment method is not in the closed set
            NotFoundError: If the party does not exist
        """
        require_receipt_moment(receipt_date, receipt_time)
        new_receipt = domain.NewReceipt(
            payment_method=parse_payment_method(payment_method),
            party_id=party_id,
            date=receipt_date,
            time=receipt_time,
            items=normalize_items(items),
        )
        with self._session() as session:
            self._require_party(session, party_id)
            receipt = new_receipt_to_orm(new_receipt)
            session.add(receipt)
            session.flush()
            logger.debug("Created receipt %d for party %d", receipt.id, party_id)
            return receipt_to_domain(receipt)

    def get_receipt(self, receipt_id: int) -> Optional[domain.Receipt]:
        """Get receipt by ID."""
        with self._session() as session:
            receipt = session.get(Receipt, receipt_id)
            if receipt is None:
                return None
            return receipt_to_domain(receipt)

    def list_receipts(self, party_id: Optional[int] = None) -> list[domain.Receipt]:
        """List receipts, optionally filtered by party."""
        with self._session() as session:
            query = session.query(Receipt)
            if party_id is not None:
                query = query.filter(Receipt.party_id == party_id)
            receipts = query.order_by(Receipt.date, Receipt.time, Receipt.id).all()
            return [receipt_to_domain(r) for r in receipts]

    def delete_receipt(self, receipt_id: int) -> int:
        with self._session() as session:
            return (
                session.query(Receipt)
                .filter(Receipt.id == receipt_id)
                .delete(synchronize_session=False)
            )
