"""Domain model entities for salonbook.

These are pure data classes representing business concepts, independent of
the database schema. Rows coming back from the store are converted into
these by the mappers in salonbook.database.mappers.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class PaymentType(str, Enum):
    """Payment method recorded on every record and expense."""

    CASH = "Cash"
    CARD = "Card"
    BANK = "Bank"

    @classmethod
    def values(cls) -> tuple[str, ...]:
        return tuple(member.value for member in cls)


@dataclass(frozen=True)
class Customer:
    """Customer domain entity."""

    id: int
    name: str
    phone: Optional[str]
    email: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class ReferenceItem:
    """Named reference row that is deactivated rather than deleted."""

    id: int
    name: str
    active: bool
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None


@dataclass(frozen=True)
class Service(ReferenceItem):
    """Service offered by the salon."""


@dataclass(frozen=True)
class StaffMember(ReferenceItem):
    """Member of staff."""


@dataclass(frozen=True)
class ExpenseType(ReferenceItem):
    """Expense category."""


@dataclass(frozen=True)
class Record:
    """Completed transaction (a service rendered and paid for).

    customer_name, service and staff are free text copied at creation time,
    so deactivating or renaming reference data never changes history.
    """

    id: int
    date: date
    customer_name: Optional[str]
    service: Optional[str]
    staff: Optional[str]
    price: Decimal
    payment_type: str
    created_at: datetime


@dataclass(frozen=True)
class Expense:
    """Expense domain entity."""

    id: int
    date: date
    type: str
    description: Optional[str]
    amount: Decimal
    payment_type: str
    created_at: datetime


@dataclass(frozen=True)
class CustomerHistory:
    """Customer together with their most recent records."""

    customer: Customer
    records: tuple[Record, ...] = ()


@dataclass(frozen=True)
class PaymentTypeTotal:
    """Count and sum for one payment type."""

    payment_type: str
    count: int
    total: Decimal


@dataclass(frozen=True)
class Totals:
    """Ungrouped count and amount."""

    count: int = 0
    amount: Decimal = Decimal("0")


@dataclass(frozen=True)
class LedgerSection:
    """Income or expense side of a daily summary."""

    by_payment_type: tuple[PaymentTypeTotal, ...] = ()
    total: Totals = field(default_factory=Totals)


@dataclass(frozen=True)
class DailySummary:
    """Income, expenses and net profit for one date."""

    date: date
    income: LedgerSection
    expenses: LedgerSection
    net_profit: Decimal


@dataclass(frozen=True)
class StaffPerformance:
    """Aggregated revenue for one staff member over a date range."""

    staff: str
    service_count: int
    total_revenue: Decimal
    average_price: Decimal
    services_provided: tuple[str, ...] = ()


@dataclass(frozen=True)
class ServiceAnalysis:
    """Aggregated price statistics for one service over a date range."""

    service: str
    count: int
    total_revenue: Decimal
    average_price: Decimal
    min_price: Decimal
    max_price: Decimal
