"""Host environment capability used by the credential store.

Home-directory discovery, the working directory and environment variables
are looked up through this object rather than globally, so tests can point
the store at a temporary directory.
"""

import os
from pathlib import Path
from typing import Mapping, Optional, Protocol


class HostEnvironment(Protocol):
    """Ambient lookups the credential store depends on."""

    def home_dir(self) -> Path:
        """Return the current user's home directory."""

    def working_dir(self) -> Path:
        """Return the process working directory."""

    def getenv(self, name: str) -> Optional[str]:
        """Return an environment variable, or None when unset."""


class SystemEnvironment:
    """HostEnvironment backed by the running process."""

    def home_dir(self) -> Path:
        return Path.home()

    def working_dir(self) -> Path:
        return Path.cwd()

    def getenv(self, name: str) -> Optional[str]:
        return os.environ.get(name)


class StaticEnvironment:
    """HostEnvironment with fixed directories and variables."""

    def __init__(
        self,
        home: Path,
        cwd: Path,
        env: Optional[Mapping[str, str]] = None,
    ):
        self.home = Path(home)
        self.cwd = Path(cwd)
        self.env = dict(env or {})

    def home_dir(self) -> Path:
        return self.home

    def working_dir(self) -> Path:
        return self.cwd

    def getenv(self, name: str) -> Optional[str]:
        return self.env.get(name)


__all__ = ["HostEnvironment", "SystemEnvironment", "StaticEnvironment"]
