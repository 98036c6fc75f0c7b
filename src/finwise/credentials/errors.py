"""Errors and warnings raised while resolving database credentials."""


class CredentialError(Exception):
    """Base class for credential and configuration failures."""


class ConfigurationError(CredentialError):
    """No credential source resolved, or a setting is unusable.

    Unrecoverable for the current process: the operator must run
    ``finwise setup-db`` or set the environment.
    """


class MalformedCredentialsError(CredentialError):
    """A keyfile is missing its ``username`` or ``password`` entry."""


class LegacyKeyfileWarning(DeprecationWarning):
    """Credentials were read from the insecure working-directory keyfile."""
