"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so the ORM rows never leak out of
the database package.
"""

from finwise.domain import entities as domain
from finwise.database.models import (
    Account as ORMAccount,
    Party as ORMParty,
    Receipt as ORMReceipt,
    Transaction as ORMTransaction,
)


def party_to_domain(orm_party: ORMParty) -> domain.Party:
    """Convert SQLAlchemy Party model to domain Party entity."""
    return domain.Party(
        id=orm_party.id,
        name=orm_party.name,
        phone=orm_party.phone,
        eban=orm_party.eban,
        address_id=orm_party.address_id,
    )


def new_party_to_orm(new_party: domain.NewParty) -> ORMParty:
    return ORMParty(
        name=new_party.name,
        phone=new_party.phone,
        eban=new_party.eban,
        address_id=new_party.address_id,
    )


def account_to_domain(orm_account: ORMAccount) -> domain.Account:
    """Convert SQLAlchemy Account model to domain Account entity."""
    return domain.Account(
        id=orm_account.id,
        party_id=orm_account.party_id,
        balance=orm_account.balance,
    )


def new_account_to_orm(new_account: domain.NewAccount) -> ORMAccount:
    return ORMAccount(party_id=new_account.party_id, balance=new_account.balance)


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    return domain.Transaction(
        id=orm_transaction.id,
        amount=orm_transaction.amount,
        from_party_id=orm_transaction.from_party_id,
        to_party_id=orm_transaction.to_party_id,
        timestamp=orm_transaction.date,
    )


def new_transaction_to_orm(new_transaction: domain.NewTransaction) -> ORMTransaction:
    return ORMTransaction(
        amount=new_transaction.amount,
        from_party_id=new_transaction.from_party_id,
        to_party_id=new_transaction.to_party_id,
        date=new_transaction.timestamp,
    )


def receipt_to_domain(orm_receipt: ORMReceipt) -> domain.Receipt:
    """Convert SQLAlchemy Receipt model to domain Receipt entity."""
    return domain.Receipt(
        id=orm_receipt.id,
        payment_method=domain.PaymentMethod(orm_receipt.payment_method),
        party_id=orm_receipt.party_id,
        date=orm_receipt.date,
        time=orm_receipt.time,
        items=tuple(orm_receipt.items or ()),
    )


def new_receipt_to_orm(new_receipt: domain.NewReceipt) -> ORMReceipt:
    return ORMReceipt(
        payment_method=new_receipt.payment_method.value,
        party_id=new_receipt.party_id,
        date=new_receipt.date,
        time=new_receipt.time,
        items=list(new_receipt.items),
    )
