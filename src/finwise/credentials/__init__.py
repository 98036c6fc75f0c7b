"""Database credential resolution and secure keyfile management."""

from finwise.credentials.environment import HostEnvironment, StaticEnvironment, SystemEnvironment
from finwise.credentials.errors import (
    ConfigurationError,
    CredentialError,
    LegacyKeyfileWarning,
    MalformedCredentialsError,
)
from finwise.credentials.keyfile import Credentials, parse_keyfile
from finwise.credentials.legacy import LegacyKeyfile
from finwise.credentials.store import (
    ConnectionDescriptor,
    CredentialSource,
    CredentialStatus,
    CredentialStore,
    SetupResult,
)

__all__ = [
    "HostEnvironment",
    "StaticEnvironment",
    "SystemEnvironment",
    "ConfigurationError",
    "CredentialError",
    "LegacyKeyfileWarning",
    "MalformedCredentialsError",
    "Credentials",
    "parse_keyfile",
    "LegacyKeyfile",
    "ConnectionDescriptor",
    "CredentialSource",
    "CredentialStatus",
    "CredentialStore",
    "SetupResult",
]
