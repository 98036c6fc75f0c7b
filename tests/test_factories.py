"""Tests for repository factories."""

from decimal import Decimal

import pytest

from finwise.config import Config, DatabaseConfig
from finwise.credentials.errors import ConfigurationError
from finwise.database.factories import create_repository
from finwise.database.sqlalchemy_db import SQLAlchemyLedgerRepository


def test_create_repository_uses_resolved_descriptor(make_store, tmp_path):
    db_file = tmp_path / "ledger.db"
    store = make_store(env={"DATABASE_URL": f"sqlite:///{db_file}"})
    config = Config(database=DatabaseConfig(pool_size=3, timeout_seconds=2))

    repository = create_repository(config=config, store=store)
    try:
        assert isinstance(repository, SQLAlchemyLedgerRepository)
        assert repository.pool.max_size == 3
        assert repository.pool.timeout_seconds == 2

        repository.initialize_schema()
        party = repository.create_party("Alice", "555", "DE89", 1)
        account = repository.create_account(party.id, Decimal("1.50"))
        assert repository.get_account(account.id).balance == Decimal("1.50")
    finally:
        repository.pool.close()


def test_create_repository_without_credentials(make_store):
    with pytest.raises(ConfigurationError):
        create_repository(config=Config(), store=make_store())
