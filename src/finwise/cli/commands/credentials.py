"""Credential setup and status commands."""

import click

from finwise.cli.error_handling import HANDLED_ERRORS, handle_error
from finwise.cli.prompter import ClickPrompter


def register_commands(cli):
    """Register credential commands with the CLI group."""

    @cli.command("setup-db")
    @click.pass_context
    def setup_db(ctx):
        """Store database credentials securely in ~/FinWise/."""
        store = ctx.obj["store"]
        try:
            result = store.setup(ClickPrompter())
        except HANDLED_ERRORS as e:
            handle_error(ctx, e)
            return

        if not result.written:
            click.echo(f"Kept existing credentials at {result.keyfile_path}")
            return
        click.echo(f"Saved database credentials to {result.keyfile_path}")
        if result.legacy_removed:
            click.echo("Removed legacy keyfile ./db_keyfile")
        elif store.legacy.exists():
            click.echo(
                f"Warning: legacy keyfile {store.legacy.path} still exists and is insecure",
                err=True,
            )

    @cli.command("status")
    @click.pass_context
    def status(ctx):
        """Show where database credentials are stored."""
        info = ctx.obj["store"].status()
        click.echo(f"Secure directory: {info.secure_dir}")
        click.echo(f"Keyfile: {info.keyfile_path}")
        click.echo(f"Credentials: {'present' if info.credentials_exist else 'missing'}")
        if info.legacy_present:
            click.echo("Legacy keyfile ./db_keyfile present; run 'finwise setup-db' to migrate")
        if not info.credentials_exist:
            click.echo("Run 'finwise setup-db' to store credentials securely.")
