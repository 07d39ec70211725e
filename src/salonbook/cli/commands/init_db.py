"""Initialize the database with default reference data."""

import click

from salonbook.cli.error_handling import handle_store_error
from salonbook.database.errors import StoreError
from salonbook.database.seed import seed_defaults


@click.command("init-db")
@click.pass_context
def init_db(ctx):
    """Create the schema and add default services, staff and expense types.

    Tables that already contain rows are left untouched.
    """
    db = ctx.obj["db"]
    try:
        inserted = seed_defaults(db)
    except StoreError as e:
        handle_store_error(ctx, e)

    for table, count in inserted.items():
        if count:
            click.echo(f"Added {count} default {table.replace('_', ' ')}")
        else:
            click.echo(f"Skipped {table.replace('_', ' ')} (already populated)")
    click.echo("Database ready.")


def register_commands(cli):
    """Register init-db command with main CLI."""
    cli.add_command(init_db)
