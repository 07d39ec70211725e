"""Shared behaviour of the dated money tables (records and expenses)."""

from datetime import date
from typing import Any, Callable, Generic, Mapping, Optional, TypeVar

from salonbook.database.base import Database
from salonbook.database.errors import CHECK_VIOLATION, StoreError
from salonbook.database.models import column_types
from salonbook.domain.errors import ValidationError, constraint_rejected, invalid_month
from salonbook.utils.date_parser import month_bounds

E = TypeVar("E")


class LedgerService(Generic[E]):
    """Create, list by day or month, and hard-delete rows of one ledger table.

    Subclasses set table, label, amount_field and to_domain.
    """

    table: str
    label: str
    amount_field: str
    to_domain: Callable[[Mapping[str, Any]], E]

    def __init__(self, db: Database):
        """Initialize ledger service.

        Args:
            db: Database instance
        """
        self.db = db
        self.columns = column_types(self.table)

    def _insert(self, values: dict[str, Any]) -> E:
        try:
            row = self.db.insert_row(self.table, values)
        except StoreError as error:
            if error.code == CHECK_VIOLATION:
                raise ValidationError(constraint_rejected(self.label, self.amount_field)) from error
            raise
        return self.to_domain(row)

    def list_daily(self, day: date) -> list[E]:
        """List rows for one date, newest first."""
        rows = self.db.fetch_all(
            f"SELECT * FROM {self.table} WHERE date = :p1 ORDER BY created_at DESC, id DESC",
            [day],
            self.columns,
        )
        return [self.to_domain(row) for row in rows]

    def list_monthly(self, year: int, month: int) -> list[E]:
        """List rows dated from day 1 to day 31 of the month, newest first.

        Raises:
            ValidationError: If year/month is not a calendar month
        """
        try:
            start, end = month_bounds(year, month)
        except (ValueError, OverflowError) as error:
            raise ValidationError(invalid_month(year, month)) from error

        rows = self.db.fetch_all(
            f"SELECT * FROM {self.table} WHERE date >= :p1 AND date <= :p2 "
            "ORDER BY date DESC, created_at DESC, id DESC",
            [start, end],
            self.columns,
        )
        return [self.to_domain(row) for row in rows]

    def _delete(self, row_id: int) -> Optional[E]:
        row = self.db.hard_delete(self.table, {"id": row_id})
        return self.to_domain(row) if row is not None else None
