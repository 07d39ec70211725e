"""Store error type and driver error code extraction."""

from typing import Any, Optional, Sequence

from sqlalchemy import exc as sa_exc

UNIQUE_VIOLATION = "23505"
CHECK_VIOLATION = "23514"
NOT_NULL_VIOLATION = "23502"
FOREIGN_KEY_VIOLATION = "23503"
POOL_TIMEOUT = "pool_timeout"
OPERATIONAL = "operational"
UNKNOWN = "unknown"

CONSTRAINT_CODES = frozenset(
    {UNIQUE_VIOLATION, CHECK_VIOLATION, NOT_NULL_VIOLATION, FOREIGN_KEY_VIOLATION}
)

# sqlite3 exposes extended result code names (Python 3.11+)
_SQLITE_CODES = {
    "SQLITE_CONSTRAINT_UNIQUE": UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_PRIMARYKEY": UNIQUE_VIOLATION,
    "SQLITE_CONSTRAINT_CHECK": CHECK_VIOLATION,
    "SQLITE_CONSTRAINT_NOTNULL": NOT_NULL_VIOLATION,
    "SQLITE_CONSTRAINT_FOREIGNKEY": FOREIGN_KEY_VIOLATION,
}

STATEMENT_PREVIEW = 100


class StoreError(Exception):
    """Failure reported by the relational store or its connection pool.

    Attributes:
        code: SQLSTATE-style code (see module constants) or the driver's own
        statement: Statement text, truncated
        params: Bound parameter values
    """

    def __init__(
        self,
        message: str,
        code: str = UNKNOWN,
        statement: Optional[str] = None,
        params: Optional[Sequence[Any]] = None,
    ):
        super().__init__(message)
        self.code = code
        self.statement = statement
        self.params = tuple(params) if params is not None else ()

    @property
    def is_constraint_violation(self) -> bool:
        return self.code in CONSTRAINT_CODES

    @property
    def is_unique_violation(self) -> bool:
        return self.code == UNIQUE_VIOLATION


def preview(statement: str) -> str:
    """Collapse whitespace and truncate a statement for logs."""
    return " ".join(statement.split())[:STATEMENT_PREVIEW]


def error_code(error: BaseException) -> str:
    """Extract a structured error code from a SQLAlchemy or driver error."""
    if isinstance(error, sa_exc.TimeoutError):
        return POOL_TIMEOUT

    orig = getattr(error, "orig", None) or error
    # psycopg2 uses pgcode, psycopg 3 uses sqlstate
    for attribute in ("pgcode", "sqlstate"):
        code = getattr(orig, attribute, None)
        if code:
            return str(code)

    sqlite_name = getattr(orig, "sqlite_errorname", None)
    if sqlite_name:
        return _SQLITE_CODES.get(sqlite_name, sqlite_name)

    if isinstance(error, sa_exc.OperationalError):
        return OPERATIONAL
    return UNKNOWN
