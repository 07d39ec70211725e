"""SQLAlchemy models for the salonbook database.

The models are used for schema creation and as the column whitelist for the
generic statement builders. Queries themselves are written as parameterized
SQL text.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    Text,
    DateTime,
    Date,
    Numeric,
    Boolean,
    CheckConstraint,
    Index,
    Table,
    func,
    true,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeEngine

from salonbook.domain.entities import PaymentType

Base = declarative_base()

MONEY = Numeric(10, 2)

_PAYMENT_TYPE_CHECK = "payment_type IN ({})".format(
    ", ".join(f"'{value}'" for value in PaymentType.values())
)


class Customer(Base):
    """Customer model."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)


class Service(Base):
    """Service model (soft-deleted through the active flag)."""

    __tablename__ = "services"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)
    active = Column(Boolean, server_default=true(), nullable=False)
    updated_at = Column(DateTime, nullable=True)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (Index("idx_services_active", "active"),)


class Staff(Base):
    """Staff member model."""

    __tablename__ = "staff"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)
    active = Column(Boolean, server_default=true(), nullable=False)
    updated_at = Column(DateTime, nullable=True)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (Index("idx_staff_active", "active"),)


class ExpenseType(Base):
    """Expense type model."""

    __tablename__ = "expense_types"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), unique=True, nullable=False)
    active = Column(Boolean, server_default=true(), nullable=False)
    updated_at = Column(DateTime, nullable=True)
    deleted_at = Column(DateTime, nullable=True)

    __table_args__ = (Index("idx_expense_types_active", "active"),)


class Record(Base):
    """Daily transaction record.

    customer_name, service and staff are plain text, not foreign keys.
    """

    __tablename__ = "records"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    customer_name = Column(String(255), nullable=True)
    service = Column(String(255), nullable=True)
    staff = Column(String(255), nullable=True)
    price = Column(MONEY, nullable=False)
    payment_type = Column(String(50), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint(_PAYMENT_TYPE_CHECK, name="ck_records_payment_type"),
        CheckConstraint("price > 0", name="ck_records_price_positive"),
        Index("idx_records_date", "date"),
        Index("idx_records_staff", "staff"),
        Index("idx_records_service", "service"),
        Index("idx_records_customer", "customer_name"),
        Index("idx_records_payment", "payment_type"),
    )


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False)
    type = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    amount = Column(MONEY, nullable=False)
    payment_type = Column(String(50), nullable=False)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)

    __table_args__ = (
        CheckConstraint(_PAYMENT_TYPE_CHECK, name="ck_expenses_payment_type"),
        Index("idx_expenses_date", "date"),
        Index("idx_expenses_type", "type"),
        Index("idx_expenses_payment", "payment_type"),
    )


def get_table(table_name: str) -> Table:
    """Return the declared table with the given name.

    Raises:
        ValueError: If no such table is declared
    """
    table = Base.metadata.tables.get(table_name)
    if table is None:
        raise ValueError(f"Unknown table '{table_name}'")
    return table


def column_types(table_name: str) -> dict[str, TypeEngine]:
    """Return a mapping of column name to SQL type for a table."""
    return {column.name: column.type for column in get_table(table_name).columns}
