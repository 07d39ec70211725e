"""Record management commands."""

import click

from salonbook.cli.date_filters import parse_date_or_exit, parse_month_or_exit
from salonbook.cli.error_handling import handle_domain_error, handle_store_error
from salonbook.database.errors import StoreError
from salonbook.domain.entities import PaymentType, Record
from salonbook.domain.errors import DomainError
from salonbook.domain.record import RecordService
from salonbook.utils.amount_parser import parse_amount
from salonbook.utils.date_parser import parse_date


def format_record(record: Record) -> str:
    return (
        f"{record.id:>5}  {record.date}  {record.payment_type:<5} {record.price:>10,.2f}  "
        f"{record.service or '-'} | {record.staff or '-'} | {record.customer_name or '-'}"
    )


@click.group("record")
def record_group():
    """Manage transaction records."""
    pass


@record_group.command("add")
@click.option("--date", "date_str", default="today", help="Record date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--price", required=True, help="Price paid (e.g., 150 or 1,250.00)")
@click.option(
    "--payment-type",
    required=True,
    type=click.Choice(PaymentType.values(), case_sensitive=False),
    help="How the customer paid",
)
@click.option("--customer", help="Customer name")
@click.option("--service", help="Service name")
@click.option("--staff", help="Staff member name")
@click.pass_context
def add_record(
    ctx,
    date_str: str,
    price: str,
    payment_type: str,
    customer: str | None,
    service: str | None,
    staff: str | None,
):
    """Add a record.

    Examples:
        salonbook record add --price 150 --payment-type Cash --service Haircut --staff Barber
        salonbook record add --date yesterday --price 90 --payment-type Card
    """
    service_layer = RecordService(ctx.obj["db"])
    record_date = parse_date_or_exit(ctx, date_str)
    try:
        amount = parse_amount(price)
    except ValueError as e:
        click.echo(f"Error: Invalid price: {e}", err=True)
        ctx.exit(1)

    try:
        record = service_layer.create_record(
            date=record_date,
            price=amount,
            payment_type=payment_type,
            customer_name=customer,
            service=service,
            staff=staff,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StoreError as e:
        handle_store_error(ctx, e)

    click.echo(f"Created record {record.id}")
    click.echo(f"  Date: {record.date}")
    click.echo(f"  Price: {record.price:,.2f} ({record.payment_type})")


@record_group.command("list")
@click.option("--date", "date_str", help="List records for one date (default: today)")
@click.option("--month", help="List records for a month (YYYY-MM)")
@click.pass_context
def list_records(ctx, date_str: str | None, month: str | None):
    """List records for a date or a month."""
    if date_str and month:
        click.echo("Error: --date and --month cannot be combined.", err=True)
        ctx.exit(1)

    service_layer = RecordService(ctx.obj["db"])
    try:
        if month:
            records = service_layer.list_monthly(*parse_month_or_exit(ctx, month))
        else:
            day = parse_date_or_exit(ctx, date_str) if date_str else parse_date("today")
            records = service_layer.list_daily(day)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StoreError as e:
        handle_store_error(ctx, e)

    if not records:
        click.echo("No records found.")
        return

    for record in records:
        click.echo(format_record(record))
    total = sum(record.price for record in records)
    click.echo(f"{len(records)} record(s), total {total:,.2f}")


@record_group.command("delete")
@click.argument("record_id", type=int)
@click.pass_context
def delete_record(ctx, record_id: int):
    """Delete a record permanently."""
    try:
        record = RecordService(ctx.obj["db"]).delete_record(record_id)
    except StoreError as e:
        handle_store_error(ctx, e)
    if record is None:
        click.echo(f"Error: Record {record_id} not found", err=True)
        ctx.exit(1)
    click.echo(f"Deleted record {record_id}")
    click.echo(format_record(record))


def register_commands(cli):
    """Register record commands with main CLI."""
    cli.add_command(record_group)
