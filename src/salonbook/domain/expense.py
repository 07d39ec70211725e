"""Expense domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from salonbook.database.mappers import expense_to_domain
from salonbook.domain.entities import Expense
from salonbook.domain.ledger import LedgerService


class ExpenseService(LedgerService[Expense]):
    """Service for managing expenses."""

    table = "expenses"
    label = "Expense"
    amount_field = "amount"
    to_domain = staticmethod(expense_to_domain)

    def create_expense(
        self,
        date: date,
        type: str,
        amount: Decimal,
        payment_type: str,
        description: Optional[str] = None,
    ) -> Expense:
        """Create an expense.

        Raises:
            ValidationError: If the store rejects payment_type
        """
        return self._insert(
            {
                "date": date,
                "type": type,
                "description": description,
                "amount": amount,
                "payment_type": payment_type,
            }
        )

    def delete_expense(self, expense_id: int) -> Optional[Expense]:
        """Delete an expense, returning it, or None if no expense has that id."""
        return self._delete(expense_id)
