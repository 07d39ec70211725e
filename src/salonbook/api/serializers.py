"""JSON shapes that differ from the plain entity fields."""

from typing import Any

from salonbook.domain.entities import DailySummary, LedgerSection


def _section(section: LedgerSection) -> dict[str, Any]:
    return {
        "byPaymentType": [
            {"payment_type": group.payment_type, "count": group.count, "total": group.total}
            for group in section.by_payment_type
        ],
        "total": {"count": section.total.count, "amount": section.total.amount},
    }


def daily_summary_to_json(summary: DailySummary) -> dict[str, Any]:
    """Render a daily summary with the byPaymentType/netProfit keys clients expect."""
    return {
        "date": summary.date,
        "income": _section(summary.income),
        "expenses": _section(summary.expenses),
        "netProfit": summary.net_profit,
    }
