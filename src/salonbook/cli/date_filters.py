"""CLI helpers for dates, months and date ranges."""

from datetime import date

import click

from salonbook.utils.date_parser import get_date_range, parse_date

PERIODS = ["this-month", "this-year", "this-week", "last-month", "last-year", "last-week"]


def period_options(command):
    """Add --start-date/--end-date and one flag per period to a command.

    The flags arrive as keyword arguments named this_month, last_week, etc.
    """
    for period in reversed(PERIODS):
        command = click.option(
            f"--{period}", is_flag=True, help=f"Report on {period.replace('-', ' ')}"
        )(command)
    command = click.option("--end-date", help="End date (YYYY-MM-DD or 'today')")(command)
    command = click.option("--start-date", help="Start date (YYYY-MM-DD or 'yesterday')")(command)
    return command


def parse_date_or_exit(ctx: click.Context, value: str, label: str = "date") -> date:
    """Parse a date argument, exiting with an error message if it is invalid."""
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {label}: {e}", err=True)
        ctx.exit(1)


def parse_month_or_exit(ctx: click.Context, value: str) -> tuple[int, int]:
    """Parse YYYY-MM into (year, month)."""
    try:
        year, month = (int(part) for part in value.split("-"))
    except ValueError:
        click.echo(f"Error: Invalid month '{value}', expected YYYY-MM", err=True)
        ctx.exit(1)
    return year, month


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
    default_range: tuple[date, date],
) -> tuple[date, date]:
    """Resolve CLI date range from period flags or explicit dates.

    period_flags maps a period name (e.g. "this_month") to whether its flag
    was given. A missing start or end date is taken from default_range.
    """
    selected = [name for name, is_set in period_flags.items() if is_set]

    if len(selected) > 1:
        click.echo(
            "Error: Only one period option (--this-month, --this-year, --this-week, "
            "--last-month, --last-year, --last-week) can be specified at a time.",
            err=True,
        )
        ctx.exit(1)

    if selected and (start_date or end_date):
        click.echo(
            "Error: Period options (--this-month, --this-year, etc.) cannot be combined "
            "with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if selected:
        return get_date_range(selected[0].replace("_", "-"))

    start, end = default_range
    if start_date:
        start = parse_date_or_exit(ctx, start_date, "start date")
    if end_date:
        end = parse_date_or_exit(ctx, end_date, "end date")
    return start, end
