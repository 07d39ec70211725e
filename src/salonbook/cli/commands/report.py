"""Report commands."""

import click

from salonbook.cli.date_filters import parse_date_or_exit, period_options, resolve_cli_date_range
from salonbook.cli.error_handling import handle_store_error
from salonbook.database.errors import StoreError
from salonbook.domain.entities import LedgerSection
from salonbook.domain.reports import ReportService
from salonbook.utils.date_parser import get_date_range


def _echo_section(title: str, section: LedgerSection) -> None:
    click.echo(f"{title}: {section.total.amount:,.2f} ({section.total.count} entries)")
    for group in section.by_payment_type:
        click.echo(f"  {group.payment_type:<8} {group.total:>12,.2f}  ({group.count})")


def _date_range(ctx, start_date, end_date, **period_flags):
    return resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=period_flags,
        default_range=get_date_range("this-month"),
    )


@click.group("report")
def report_group():
    """Financial reports."""
    pass


@report_group.command("daily-summary")
@click.argument("day", default="today")
@click.pass_context
def daily_summary(ctx, day: str):
    """Show income, expenses and net profit for one day (default: today)."""
    report_day = parse_date_or_exit(ctx, day)
    try:
        summary = ReportService(ctx.obj["db"]).daily_summary(report_day)
    except StoreError as e:
        handle_store_error(ctx, e)

    click.echo(f"Daily summary for {summary.date}")
    click.echo()
    _echo_section("Income", summary.income)
    _echo_section("Expenses", summary.expenses)
    click.echo()
    click.echo(f"Net profit: {summary.net_profit:,.2f}")


@report_group.command("staff-performance")
@period_options
@click.pass_context
def staff_performance(ctx, start_date: str | None, end_date: str | None, **period_flags):
    """Show revenue per staff member (default: this month)."""
    start, end = _date_range(ctx, start_date, end_date, **period_flags)
    try:
        rows = ReportService(ctx.obj["db"]).staff_performance(start, end)
    except StoreError as e:
        handle_store_error(ctx, e)

    click.echo(f"Staff performance {start} to {end}")
    if not rows:
        click.echo("No records found.")
        return

    click.echo(f"{'Staff':<20} {'Count':>6} {'Revenue':>12} {'Average':>10}  Services")
    click.echo("-" * 70)
    for row in rows:
        click.echo(
            f"{row.staff:<20} {row.service_count:>6} {row.total_revenue:>12,.2f} "
            f"{row.average_price:>10,.2f}  {', '.join(row.services_provided)}"
        )


@report_group.command("service-analysis")
@period_options
@click.pass_context
def service_analysis(ctx, start_date: str | None, end_date: str | None, **period_flags):
    """Show price statistics per service (default: this month)."""
    start, end = _date_range(ctx, start_date, end_date, **period_flags)
    try:
        rows = ReportService(ctx.obj["db"]).service_analysis(start, end)
    except StoreError as e:
        handle_store_error(ctx, e)

    click.echo(f"Service analysis {start} to {end}")
    if not rows:
        click.echo("No records found.")
        return

    click.echo(f"{'Service':<24} {'Count':>6} {'Revenue':>12} {'Average':>10} {'Min':>10} {'Max':>10}")
    click.echo("-" * 77)
    for row in rows:
        click.echo(
            f"{row.service:<24} {row.count:>6} {row.total_revenue:>12,.2f} "
            f"{row.average_price:>10,.2f} {row.min_price:>10,.2f} {row.max_price:>10,.2f}"
        )


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group)
