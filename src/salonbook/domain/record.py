"""Record (completed transaction) domain service."""

from datetime import date
from decimal import Decimal
from typing import Optional

from salonbook.database.mappers import record_to_domain
from salonbook.domain.entities import Record
from salonbook.domain.ledger import LedgerService

CUSTOMER_HISTORY_LIMIT = 50


class RecordService(LedgerService[Record]):
    """Service for managing transaction records."""

    table = "records"
    label = "Record"
    amount_field = "price"
    to_domain = staticmethod(record_to_domain)

    def create_record(
        self,
        date: date,
        price: Decimal,
        payment_type: str,
        customer_name: Optional[str] = None,
        service: Optional[str] = None,
        staff: Optional[str] = None,
    ) -> Record:
        """Create a record.

        Args:
            date: Transaction date
            price: Price paid, must be positive
            payment_type: One of Cash, Card, Bank
            customer_name: Optional customer name (free text)
            service: Optional service name (free text)
            staff: Optional staff member name (free text)

        Returns:
            The created record, including id and created_at

        Raises:
            ValidationError: If the store rejects payment_type or price
        """
        return self._insert(
            {
                "date": date,
                "customer_name": customer_name,
                "service": service,
                "staff": staff,
                "price": price,
                "payment_type": payment_type,
            }
        )

    def delete_record(self, record_id: int) -> Optional[Record]:
        """Delete a record, returning it, or None if no record has that id."""
        return self._delete(record_id)

    def list_for_customer(self, customer_name: str, limit: int = CUSTOMER_HISTORY_LIMIT) -> list[Record]:
        """List a customer's most recent records."""
        rows = self.db.fetch_all(
            "SELECT * FROM records WHERE customer_name = :p1 "
            "ORDER BY date DESC, created_at DESC, id DESC LIMIT :p2",
            [customer_name, limit],
            self.columns,
        )
        return [record_to_domain(row) for row in rows]
