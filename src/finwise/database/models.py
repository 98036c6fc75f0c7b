"""SQLAlchemy models for the finwise ledger."""

from decimal import Decimal
from sqlalchemy import (
    JSON,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Time,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class ExactDecimal(TypeDecorator):
    """Arbitrary-precision decimal column.

    PostgreSQL stores it as unconstrained NUMERIC. SQLite has no exact
    decimal type, so the value is stored as its string form there instead
    of going through float.
    """

    impl = Numeric
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "sqlite":
            return dialect.type_descriptor(String())
        return dialect.type_descriptor(Numeric(asdecimal=True))

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if dialect.name == "sqlite":
            return str(value)
        return value

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, Decimal):
            return value
        return Decimal(value)


class Party(Base):
    """Party model."""

    __tablename__ = "parties"

    id = Column(Integer, primary_key=True)
    name = Column(Text, nullable=False)
    phone = Column(Text, nullable=False)
    eban = Column(Text, nullable=False)
    address_id = Column(Integer, nullable=False)


class Account(Base):
    """Account model."""

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True)
    party_id = Column(Integer, ForeignKey("parties.id"), nullable=False, index=True)
    balance = Column(ExactDecimal, nullable=False)


class Transaction(Base):
    """Transaction journal model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    amount = Column(ExactDecimal, nullable=False)
    from_party_id = Column(Integer, ForeignKey("parties.id"), nullable=False, index=True)
    to_party_id = Column(Integer, ForeignKey("parties.id"), nullable=False, index=True)
    date = Column(DateTime, nullable=False)


class Receipt(Base):
    """Receipt model."""

    __tablename__ = "receipts"

    id = Column(Integer, primary_key=True)
    payment_method = Column(String(32), nullable=False)
    party_id = Column(Integer, ForeignKey("parties.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    time = Column(Time, nullable=False)
    items = Column(JSON, nullable=False, default=list)
