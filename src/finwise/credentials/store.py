"""Credential resolution and the secure keyfile lifecycle."""

from dataclasses import dataclass, field
from enum import Enum
import logging
import os
from pathlib import Path
from typing import Callable, Optional

from finwise.credentials.environment import HostEnvironment, SystemEnvironment
from finwise.credentials.errors import ConfigurationError, MalformedCredentialsError
from finwise.credentials.keyfile import Credentials, read_keyfile, write_keyfile
from finwise.credentials.legacy import LegacyKeyfile
from finwise.credentials.prompts import Prompter

logger = logging.getLogger(__name__)

SECURE_DIR_NAME = "FinWise"
SECURE_KEYFILE_NAME = ".finwise_db_credentials"
SECURE_DIR_MODE = 0o700

KEYFILE_ENV_VAR = "DATABASE_KEYFILE"
DATABASE_URL_ENV_VAR = "DATABASE_URL"


class CredentialSource(str, Enum):
    """Where a connection descriptor came from, in resolution priority order."""

    SECURE_KEYFILE = "secure_keyfile"
    ENV_KEYFILE = "env_keyfile"
    LEGACY_KEYFILE = "legacy_keyfile"
    DATABASE_URL = "database_url"


@dataclass(frozen=True)
class ConnectionDescriptor:
    """Connection URL for the backing store plus the source it was read from."""

    url: str = field(repr=False)
    source: CredentialSource


@dataclass(frozen=True)
class CredentialStatus:
    secure_dir: Path
    keyfile_path: Path
    credentials_exist: bool
    legacy_present: bool


@dataclass(frozen=True)
class SetupResult:
    keyfile_path: Path
    written: bool
    legacy_removed: bool = False


class CredentialStore:
    """Resolves the connection descriptor and manages the secure keyfile.

    Sources are tried in strict priority order:

    1. ``<home>/FinWise/.finwise_db_credentials``
    2. the keyfile named by ``DATABASE_KEYFILE``
    3. the legacy ``./db_keyfile`` (deprecated, emits a warning)
    4. the raw ``DATABASE_URL``

    Secrets are read once per ``resolve()`` call and never cached.
    """

    def __init__(self, environment: Optional[HostEnvironment] = None):
        self.environment = environment if environment is not None else SystemEnvironment()
        self.legacy = LegacyKeyfile(self.environment)

    @property
    def secure_dir(self) -> Path:
        return self.environment.home_dir() / SECURE_DIR_NAME

    @property
    def keyfile_path(self) -> Path:
        return self.secure_dir / SECURE_KEYFILE_NAME

    def resolve(self) -> ConnectionDescriptor:
        """Return the descriptor from the first source that exists and parses.

        Raises:
            ConfigurationError: If no source resolves
        """
        failures = []
        for source, load in self._sources():
            try:
                url = load()
            except (MalformedCredentialsError, OSError) as e:
                logger.warning("Skipping credential source %s: %s", source.value, e)
                failures.append(f"{source.value}: {e}")
                continue
            if url is None:
                continue
            logger.info("Resolved database credentials from %s", source.value)
            return ConnectionDescriptor(url=url, source=source)

        message = (
            "No database credentials found. Run 'finwise setup-db' to create "
            f"{self.keyfile_path}, or set {KEYFILE_ENV_VAR} or {DATABASE_URL_ENV_VAR}."
        )
        if failures:
            message += " Rejected sources: " + "; ".join(failures)
        raise ConfigurationError(message)

    def _sources(self) -> list[tuple[CredentialSource, Callable[[], Optional[str]]]]:
        return [
            (CredentialSource.SECURE_KEYFILE, self._from_secure_keyfile),
            (CredentialSource.ENV_KEYFILE, self._from_env_keyfile),
            (CredentialSource.LEGACY_KEYFILE, self._from_legacy_keyfile),
            (CredentialSource.DATABASE_URL, self._from_database_url),
        ]

    def _from_secure_keyfile(self) -> Optional[str]:
        if not self.keyfile_path.is_file():
            return None
        return read_keyfile(self.keyfile_path).to_descriptor()

    def _from_env_keyfile(self) -> Optional[str]:
        raw_path = self.environment.getenv(KEYFILE_ENV_VAR)
        if not raw_path or not raw_path.strip():
            return None
        path = Path(raw_path.strip()).expanduser()
        if not path.is_file():
            logger.warning("%s points to missing file %s", KEYFILE_ENV_VAR, path)
            return None
        return read_keyfile(path).to_descriptor()

    def _from_legacy_keyfile(self) -> Optional[str]:
        credentials = self.legacy.read()
        if credentials is None:
            return None
        return credentials.to_descriptor()

    def _from_database_url(self) -> Optional[str]:
        url = self.environment.getenv(DATABASE_URL_ENV_VAR)
        if not url or not url.strip():
            return None
        return url.strip()

    def status(self) -> CredentialStatus:
        """Report where the secure keyfile lives and what is present on disk."""
        return CredentialStatus(
            secure_dir=self.secure_dir,
            keyfile_path=self.keyfile_path,
            credentials_exist=self.keyfile_path.is_file(),
            legacy_present=self.legacy.exists(),
        )

    def setup(self, prompter: Prompter) -> SetupResult:
        """Interactively create or replace the secure keyfile.

        Asks before overwriting an existing keyfile. After a successful
        write, offers to delete a legacy ``./db_keyfile``. Never called
        implicitly; only the ``setup-db`` command runs it.

        Args:
            prompter: Source of operator input

        Returns:
            What was written and whether the legacy file was removed

        Raises:
            MalformedCredentialsError: If the username or password entered is empty
        """
        self.secure_dir.mkdir(mode=SECURE_DIR_MODE, parents=True, exist_ok=True)
        if os.name == "posix":
            os.chmod(self.secure_dir, SECURE_DIR_MODE)
        path = self.keyfile_path

        if path.exists() and not prompter.confirm(
            f"Credentials already exist at {path}. Overwrite?", default=False
        ):
            logger.info("Kept existing credentials at %s", path)
            return SetupResult(keyfile_path=path, written=False)

        username = prompter.prompt("Database username").strip()
        password = prompter.prompt("Database password", hide_input=True).strip()
        if not username or not password:
            raise MalformedCredentialsError("Username and password must not be empty")
        if any(ch in value for value in (username, password) for ch in "\r\n"):
            raise MalformedCredentialsError("Username and password must be single-line values")

        write_keyfile(path, Credentials(username=username, password=password))
        logger.info("Wrote database credentials to %s", path)

        legacy_removed = self.legacy.offer_removal(prompter)
        return SetupResult(keyfile_path=path, written=True, legacy_removed=legacy_removed)


__all__ = [
    "CredentialStore",
    "CredentialSource",
    "ConnectionDescriptor",
    "CredentialStatus",
    "SetupResult",
    "SECURE_DIR_NAME",
    "SECURE_KEYFILE_NAME",
]
