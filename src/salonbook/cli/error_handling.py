"""CLI error handling helpers."""

import click

from salonbook.database.errors import StoreError
from salonbook.domain.errors import DomainError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_store_error(ctx: click.Context, error: StoreError) -> None:
    """Render a database failure and exit with failure."""
    click.echo(f"Error: Database error [{error.code}]: {error}", err=True)
    ctx.exit(1)
