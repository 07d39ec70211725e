"""Mapper functions to convert result rows into domain entities.

Rows arrive as plain dicts from the data access layer. Aggregate columns
may come back as None (no matching rows) or, depending on the driver, as
float or int; money values are normalized to two-place Decimals here.
"""

from decimal import Decimal
from typing import Any, Mapping, Optional, Type

from salonbook.domain import entities as domain

CENT = Decimal("0.01")


def to_money(value: Any) -> Decimal:
    """Convert an amount or aggregate to a two-place Decimal, treating None as zero."""
    if value is None:
        return Decimal("0.00")
    if not isinstance(value, Decimal):
        value = Decimal(str(value))
    return value.quantize(CENT)


def to_count(value: Any) -> int:
    """Convert a COUNT result to int, treating None as zero."""
    return int(value) if value is not None else 0


def customer_to_domain(row: Mapping[str, Any]) -> domain.Customer:
    """Convert a customers row to a domain Customer entity."""
    return domain.Customer(
        id=row["id"],
        name=row["name"],
        phone=row["phone"],
        email=row["email"],
        created_at=row["created_at"],
    )


def reference_to_domain(
    row: Mapping[str, Any], entity: Type[domain.ReferenceItem]
) -> domain.ReferenceItem:
    """Convert a services/staff/expense_types row to the given entity class."""
    return entity(
        id=row["id"],
        name=row["name"],
        active=bool(row["active"]),
        updated_at=row.get("updated_at"),
        deleted_at=row.get("deleted_at"),
    )


def record_to_domain(row: Mapping[str, Any]) -> domain.Record:
    """Convert a records row to a domain Record entity."""
    return domain.Record(
        id=row["id"],
        date=row["date"],
        customer_name=row["customer_name"],
        service=row["service"],
        staff=row["staff"],
        price=to_money(row["price"]),
        payment_type=row["payment_type"],
        created_at=row["created_at"],
    )


def expense_to_domain(row: Mapping[str, Any]) -> domain.Expense:
    """Convert an expenses row to a domain Expense entity."""
    return domain.Expense(
        id=row["id"],
        date=row["date"],
        type=row["type"],
        description=row["description"],
        amount=to_money(row["amount"]),
        payment_type=row["payment_type"],
        created_at=row["created_at"],
    )


def payment_type_total_to_domain(row: Mapping[str, Any]) -> domain.PaymentTypeTotal:
    return domain.PaymentTypeTotal(
        payment_type=row["payment_type"],
        count=to_count(row["count"]),
        total=to_money(row["total"]),
    )


def totals_to_domain(row: Optional[Mapping[str, Any]]) -> domain.Totals:
    """Convert an ungrouped COUNT/SUM row; a missing row counts as zero."""
    if row is None:
        return domain.Totals()
    return domain.Totals(count=to_count(row["count"]), amount=to_money(row["total"]))


def service_analysis_to_domain(row: Mapping[str, Any]) -> domain.ServiceAnalysis:
    return domain.ServiceAnalysis(
        service=row["service"],
        count=to_count(row["count"]),
        total_revenue=to_money(row["total_revenue"]),
        average_price=to_money(row["average_price"]),
        min_price=to_money(row["min_price"]),
        max_price=to_money(row["max_price"]),
    )
