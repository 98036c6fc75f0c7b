"""CLI error handling helpers."""

import click

from finwise.credentials.errors import CredentialError
from finwise.database.errors import PoolError
from finwise.domain.errors import DomainError

HANDLED_ERRORS = (CredentialError, PoolError, DomainError)


def handle_error(ctx: click.Context, error: Exception) -> None:
    """Render a core error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
