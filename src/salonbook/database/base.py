"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import datetime, UTC
from typing import Any, Callable, Mapping, Optional, Sequence, TypeVar

from sqlalchemy.types import TypeEngine

from salonbook.database.models import column_types
from salonbook.database.statements import build_delete, build_insert, build_update

Row = dict[str, Any]
T = TypeVar("T")


class SQLExecutor(ABC):
    """Generic query and write primitives over a single abstract hook.

    Subclasses decide where a statement runs (a pooled connection per call,
    or one connection held for a transaction) by implementing _run.
    """

    @abstractmethod
    def _run(
        self,
        statement: str,
        params: Sequence[Any] = (),
        param_types: Sequence[Optional[TypeEngine]] = (),
        result_types: Optional[Mapping[str, TypeEngine]] = None,
    ) -> list[Row]:
        """Run one statement and return its rows (empty if it returns none).

        Raises:
            StoreError: If the store or pool reports a failure
        """
        pass

    def execute(
        self,
        statement: str,
        params: Sequence[Any] = (),
        result_types: Optional[Mapping[str, TypeEngine]] = None,
    ) -> list[Row]:
        """Run a parameterized statement.

        Args:
            statement: SQL text using :p1 .. :pN placeholders
            params: Values bound to the placeholders by position
            result_types: Optional column name -> type mapping for result rows

        Returns:
            Result rows as dicts
        """
        return self._run(statement, tuple(params), (), result_types)

    def fetch_one(
        self,
        statement: str,
        params: Sequence[Any] = (),
        result_types: Optional[Mapping[str, TypeEngine]] = None,
    ) -> Optional[Row]:
        """Return the first row, or None when the statement matched nothing."""
        rows = self.execute(statement, params, result_types)
        return rows[0] if rows else None

    def fetch_all(
        self,
        statement: str,
        params: Sequence[Any] = (),
        result_types: Optional[Mapping[str, TypeEngine]] = None,
    ) -> list[Row]:
        """Return all rows in statement order (possibly empty)."""
        return self.execute(statement, params, result_types)

    def insert_row(self, table: str, values: Mapping[str, Any]) -> Row:
        """Insert one row and return it with server-assigned defaults."""
        stmt = build_insert(table, values)
        rows = self._run(stmt.text, stmt.params, stmt.param_types, column_types(table))
        return rows[0]

    def update_row(
        self, table: str, values: Mapping[str, Any], where: Mapping[str, Any]
    ) -> Optional[Row]:
        """Update matching rows and return the first updated row, or None."""
        stmt = build_update(table, values, where)
        rows = self._run(stmt.text, stmt.params, stmt.param_types, column_types(table))
        return rows[0] if rows else None

    def soft_delete(self, table: str, where: Mapping[str, Any]) -> Optional[Row]:
        """Stamp deleted_at on matching rows."""
        return self.update_row(table, {"deleted_at": datetime.now(UTC)}, where)

    def hard_delete(self, table: str, where: Mapping[str, Any]) -> Optional[Row]:
        """Delete matching rows and return the first deleted row, or None."""
        stmt = build_delete(table, where)
        rows = self._run(stmt.text, stmt.params, stmt.param_types, column_types(table))
        return rows[0] if rows else None


class Database(SQLExecutor):
    """Abstract database interface for salonbook."""

    @abstractmethod
    def connect(self) -> None:
        """Check connectivity to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Close all pooled connections."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables and indexes)."""
        pass

    @abstractmethod
    def run_in_transaction(self, work: Callable[[SQLExecutor], T]) -> T:
        """Run work inside a single transaction.

        work receives an executor bound to one connection. The transaction
        commits when work returns and rolls back when it raises; the
        exception is re-raised and the connection is always released.
        """
        pass

    @abstractmethod
    def pool_status(self) -> dict[str, Any]:
        """Return connection pool occupancy for health reporting."""
        pass
