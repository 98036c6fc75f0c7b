"""Shared pytest fixtures for finwise tests."""

import tempfile
import os
from pathlib import Path
import pytest

from finwise.credentials.environment import StaticEnvironment
from finwise.credentials.store import CredentialStore
from finwise.database.factories import create_sqlite_repository


@pytest.fixture
def db_path():
    """Path to a temporary SQLite file, removed afterwards."""
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    yield path
    if os.path.exists(path):
        os.unlink(path)


@pytest.fixture
def repository(db_path):
    """Create a ledger repository on a temporary database."""
    repo = create_sqlite_repository(db_path, pool_size=2, timeout_seconds=1)
    repo.initialize_schema()
    yield repo
    repo.pool.close()


@pytest.fixture
def alice(repository):
    return repository.create_party(
        name="Alice", phone="555-0100", eban="DE89370400440532013000", address_id=1
    )


@pytest.fixture
def bob(repository):
    return repository.create_party(
        name="Bob", phone="555-0199", eban="GB29NWBK60161331926819", address_id=2
    )


@pytest.fixture
def home(tmp_path):
    path = tmp_path / "home"
    path.mkdir()
    return path


@pytest.fixture
def workdir(tmp_path):
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def make_store(home, workdir):
    """Build a CredentialStore over a fake home and working directory."""

    def _make(env=None):
        return CredentialStore(StaticEnvironment(home=home, cwd=workdir, env=env))

    return _make


class ScriptedPrompter:
    """Prompter that replays canned answers and records the questions asked."""

    def __init__(self, answers=(), confirmations=()):
        self.answers = list(answers)
        self.confirmations = list(confirmations)
        self.asked = []

    def prompt(self, text, hide_input=False):
        self.asked.append(text)
        return self.answers.pop(0)

    def confirm(self, text, default=False):
        self.asked.append(text)
        return self.confirmations.pop(0)


@pytest.fixture
def prompter_factory():
    return ScriptedPrompter


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def write_keyfile_text():
    """Write a username/password keyfile at the given path."""

    def _write(path: Path, username: str, password: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(f"username={username}\npassword={password}\n", encoding="utf-8")
        return path

    return _write
