"""Database bootstrap command."""

import click

from finwise.cli.error_handling import HANDLED_ERRORS, handle_error
from finwise.database.factories import create_repository


def register_commands(cli):
    """Register database commands with the CLI group."""

    @cli.command("init-db")
    @click.pass_context
    def init_db(ctx):
        """Connect to the ledger database and create missing tables."""
        try:
            repository = create_repository(config=ctx.obj["config"], store=ctx.obj["store"])
        except HANDLED_ERRORS as e:
            handle_error(ctx, e)
            return

        try:
            repository.initialize_schema()
        except HANDLED_ERRORS as e:
            handle_error(ctx, e)
            return
        finally:
            repository.pool.close()

        click.echo("Database schema is ready.")
