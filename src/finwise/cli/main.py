"""Main CLI entry point."""

import click
from dotenv import load_dotenv

from finwise.cli.commands import credentials, database
from finwise.cli.error_handling import handle_error
from finwise.config import Config
from finwise.credentials.errors import ConfigurationError
from finwise.credentials.store import CredentialStore
from finwise.utils.logging_config import configure_logging


@click.group()
@click.pass_context
def cli(ctx):
    """FinWise - Personal finance ledger.

    Run 'setup-db' first to store database credentials securely in ~/FinWise/.
    """
    ctx.ensure_object(dict)
    if "config" not in ctx.obj:
        try:
            ctx.obj["config"] = Config.from_env()
        except ConfigurationError as e:
            handle_error(ctx, e)
    ctx.obj.setdefault("store", CredentialStore())


credentials.register_commands(cli)
database.register_commands(cli)


def main():
    """Main entry point for CLI."""
    load_dotenv()
    try:
        config = Config.from_env()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        raise SystemExit(1)
    configure_logging(config.logging)
    cli(obj={"config": config})


if __name__ == "__main__":
    main()
