"""Aggregate reports over records and expenses.

Each report is computed fresh from the tables on every call, inside a
single transaction, so a failing statement aborts the whole report.
"""

from datetime import date

from sqlalchemy import Integer

from salonbook.database.base import Database, SQLExecutor
from salonbook.database.mappers import (
    payment_type_total_to_domain,
    service_analysis_to_domain,
    to_count,
    to_money,
    totals_to_domain,
)
from salonbook.database.models import MONEY
from salonbook.domain.entities import (
    DailySummary,
    LedgerSection,
    ServiceAnalysis,
    StaffPerformance,
)

_TOTAL_TYPES = {"count": Integer(), "total": MONEY}
_STATS_TYPES = {
    "count": Integer(),
    "service_count": Integer(),
    "total_revenue": MONEY,
    "average_price": MONEY,
    "min_price": MONEY,
    "max_price": MONEY,
}

# Table and amount column of each side of the daily summary
_LEDGERS = {"income": ("records", "price"), "expenses": ("expenses", "amount")}


def _ledger_section(scope: SQLExecutor, table: str, amount: str, day: date) -> LedgerSection:
    groups = scope.fetch_all(
        f"SELECT payment_type, COUNT(*) AS count, COALESCE(SUM({amount}), 0) AS total "
        f"FROM {table} WHERE date = :p1 GROUP BY payment_type ORDER BY payment_type",
        [day],
        _TOTAL_TYPES,
    )
    total = scope.fetch_one(
        f"SELECT COUNT(*) AS count, COALESCE(SUM({amount}), 0) AS total FROM {table} WHERE date = :p1",
        [day],
        _TOTAL_TYPES,
    )
    return LedgerSection(
        by_payment_type=tuple(payment_type_total_to_domain(row) for row in groups),
        total=totals_to_domain(total),
    )


class ReportService:
    """Service for financial reports."""

    def __init__(self, db: Database):
        """Initialize report service.

        Args:
            db: Database instance
        """
        self.db = db

    def daily_summary(self, day: date) -> DailySummary:
        """Summarize income and expenses for one date.

        Args:
            day: Date to summarize

        Returns:
            DailySummary with per payment type groups, totals and net profit.
            A date with no rows yields zero counts and amounts.
        """

        def build(scope: SQLExecutor) -> DailySummary:
            sections = {
                side: _ledger_section(scope, table, amount, day)
                for side, (table, amount) in _LEDGERS.items()
            }
            income, expenses = sections["income"], sections["expenses"]
            return DailySummary(
                date=day,
                income=income,
                expenses=expenses,
                net_profit=income.total.amount - expenses.total.amount,
            )

        return self.db.run_in_transaction(build)

    def staff_performance(self, start_date: date, end_date: date) -> list[StaffPerformance]:
        """Revenue per staff member over an inclusive date range.

        Records without a staff member are ignored. Rows are ordered by
        revenue, highest first. A reversed range matches no rows.
        """

        def build(scope: SQLExecutor) -> list[StaffPerformance]:
            rows = scope.fetch_all(
                "SELECT staff, COUNT(*) AS service_count, "
                "COALESCE(SUM(price), 0) AS total_revenue, AVG(price) AS average_price "
                "FROM records WHERE staff IS NOT NULL AND date >= :p1 AND date <= :p2 "
                "GROUP BY staff ORDER BY total_revenue DESC, staff",
                [start_date, end_date],
                _STATS_TYPES,
            )
            pairs = scope.fetch_all(
                "SELECT DISTINCT staff, service FROM records "
                "WHERE staff IS NOT NULL AND service IS NOT NULL "
                "AND date >= :p1 AND date <= :p2 ORDER BY staff, service",
                [start_date, end_date],
            )
            services: dict[str, list[str]] = {}
            for pair in pairs:
                services.setdefault(pair["staff"], []).append(pair["service"])

            return [
                StaffPerformance(
                    staff=row["staff"],
                    service_count=to_count(row["service_count"]),
                    total_revenue=to_money(row["total_revenue"]),
                    average_price=to_money(row["average_price"]),
                    services_provided=tuple(services.get(row["staff"], ())),
                )
                for row in rows
            ]

        return self.db.run_in_transaction(build)

    def service_analysis(self, start_date: date, end_date: date) -> list[ServiceAnalysis]:
        """Price statistics per service over an inclusive date range.

        Records without a service are ignored. Rows are ordered by number of
        records, highest first. A reversed range matches no rows.
        """

        def build(scope: SQLExecutor) -> list[ServiceAnalysis]:
            rows = scope.fetch_all(
                "SELECT service, COUNT(*) AS count, COALESCE(SUM(price), 0) AS total_revenue, "
                "AVG(price) AS average_price, MIN(price) AS min_price, MAX(price) AS max_price "
                "FROM records WHERE service IS NOT NULL AND date >= :p1 AND date <= :p2 "
                "GROUP BY service ORDER BY count DESC, service",
                [start_date, end_date],
                _STATS_TYPES,
            )
            return [service_analysis_to_domain(row) for row in rows]

        return self.db.run_in_transaction(build)
