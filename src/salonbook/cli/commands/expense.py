"""Expense management commands."""

import click

from salonbook.cli.date_filters import parse_date_or_exit, parse_month_or_exit
from salonbook.cli.error_handling import handle_domain_error, handle_store_error
from salonbook.database.errors import StoreError
from salonbook.domain.entities import Expense, PaymentType
from salonbook.domain.errors import DomainError
from salonbook.domain.expense import ExpenseService
from salonbook.utils.amount_parser import parse_amount
from salonbook.utils.date_parser import parse_date


def format_expense(expense: Expense) -> str:
    line = f"{expense.id:>5}  {expense.date}  {expense.payment_type:<5} {expense.amount:>10,.2f}  {expense.type}"
    if expense.description:
        line += f" ({expense.description})"
    return line


@click.group("expense")
def expense_group():
    """Manage expenses."""
    pass


@expense_group.command("add")
@click.option("--date", "date_str", default="today", help="Expense date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--type", "expense_type", required=True, help="Expense type (e.g., Rent)")
@click.option("--amount", required=True, help="Amount paid (e.g., 2500 or 2,500.00)")
@click.option(
    "--payment-type",
    required=True,
    type=click.Choice(PaymentType.values(), case_sensitive=False),
    help="How the expense was paid",
)
@click.option("--description", help="Free text description")
@click.pass_context
def add_expense(
    ctx,
    date_str: str,
    expense_type: str,
    amount: str,
    payment_type: str,
    description: str | None,
):
    """Add an expense.

    Examples:
        salonbook expense add --type Rent --amount 2500 --payment-type Bank
    """
    expenses = ExpenseService(ctx.obj["db"])
    expense_date = parse_date_or_exit(ctx, date_str)
    try:
        value = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: Invalid amount: {e}", err=True)
        ctx.exit(1)

    try:
        expense = expenses.create_expense(
            date=expense_date,
            type=expense_type,
            amount=value,
            payment_type=payment_type,
            description=description,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StoreError as e:
        handle_store_error(ctx, e)

    click.echo(f"Created expense {expense.id}")
    click.echo(f"  Date: {expense.date}")
    click.echo(f"  Amount: {expense.amount:,.2f} ({expense.payment_type})")


@expense_group.command("list")
@click.option("--date", "date_str", help="List expenses for one date (default: today)")
@click.option("--month", help="List expenses for a month (YYYY-MM)")
@click.pass_context
def list_expenses(ctx, date_str: str | None, month: str | None):
    """List expenses for a date or a month."""
    if date_str and month:
        click.echo("Error: --date and --month cannot be combined.", err=True)
        ctx.exit(1)

    expenses = ExpenseService(ctx.obj["db"])
    try:
        if month:
            rows = expenses.list_monthly(*parse_month_or_exit(ctx, month))
        else:
            day = parse_date_or_exit(ctx, date_str) if date_str else parse_date("today")
            rows = expenses.list_daily(day)
    except DomainError as e:
        handle_domain_error(ctx, e)
    except StoreError as e:
        handle_store_error(ctx, e)

    if not rows:
        click.echo("No expenses found.")
        return

    for expense in rows:
        click.echo(format_expense(expense))
    total = sum(expense.amount for expense in rows)
    click.echo(f"{len(rows)} expense(s), total {total:,.2f}")


@expense_group.command("delete")
@click.argument("expense_id", type=int)
@click.pass_context
def delete_expense(ctx, expense_id: int):
    """Delete an expense permanently."""
    try:
        expense = ExpenseService(ctx.obj["db"]).delete_expense(expense_id)
    except StoreError as e:
        handle_store_error(ctx, e)
    if expense is None:
        click.echo(f"Error: Expense {expense_id} not found", err=True)
        ctx.exit(1)
    click.echo(f"Deleted expense {expense_id}")
    click.echo(format_expense(expense))


def register_commands(cli):
    """Register expense commands with main CLI."""
    cli.add_command(expense_group)
