"""Detection and removal of the legacy working-directory keyfile."""

import logging
from pathlib import Path
from typing import Optional
import warnings

from finwise.credentials.environment import HostEnvironment
from finwise.credentials.errors import LegacyKeyfileWarning
from finwise.credentials.keyfile import Credentials, read_keyfile
from finwise.credentials.prompts import Prompter

logger = logging.getLogger(__name__)

LEGACY_KEYFILE_NAME = "db_keyfile"


class LegacyKeyfile:
    """The insecure ``./db_keyfile`` used before the per-user keyfile existed."""

    def __init__(self, environment: HostEnvironment):
        self.environment = environment

    @property
    def path(self) -> Path:
        return self.environment.working_dir() / LEGACY_KEYFILE_NAME

    def exists(self) -> bool:
        return self.path.is_file()

    def read(self) -> Optional[Credentials]:
        """Read the legacy keyfile, warning that it is deprecated.

        Returns:
            Credentials, or None when no legacy keyfile is present

        Raises:
            MalformedCredentialsError: If the file lacks username or password
        """
        if not self.exists():
            return None
        message = (
            f"Reading database credentials from legacy keyfile {self.path}. "
            "This location is insecure; run 'finwise setup-db' to migrate."
        )
        logger.warning(message)
        warnings.warn(message, LegacyKeyfileWarning, stacklevel=3)
        return read_keyfile(self.path)

    def offer_removal(self, prompter: Prompter) -> bool:
        """Ask whether to delete the legacy keyfile and delete it if confirmed.

        Returns:
            True if the file was deleted
        """
        if not self.exists():
            return False
        if not prompter.confirm(
            f"Found legacy keyfile at {self.path}. Delete it now that credentials are migrated?",
            default=True,
        ):
            logger.info("Keeping legacy keyfile %s", self.path)
            return False
        self.path.unlink()
        logger.info("Removed legacy keyfile %s", self.path)
        return True


__all__ = ["LegacyKeyfile", "LEGACY_KEYFILE_NAME"]
