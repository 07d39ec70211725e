"""Customer domain service."""

from typing import Optional

from salonbook.database.base import Database
from salonbook.database.errors import StoreError
from salonbook.database.mappers import customer_to_domain
from salonbook.database.models import column_types
from salonbook.domain.entities import Customer, CustomerHistory
from salonbook.domain.errors import ConflictError, duplicate_name
from salonbook.domain.record import CUSTOMER_HISTORY_LIMIT, RecordService


class CustomerService:
    """Service for managing customers."""

    def __init__(self, db: Database):
        """Initialize customer service.

        Args:
            db: Database instance
        """
        self.db = db
        self.columns = column_types("customers")
        self.records = RecordService(db)

    def list_customers(self) -> list[Customer]:
        """List all customers ordered by name."""
        rows = self.db.fetch_all("SELECT * FROM customers ORDER BY name", (), self.columns)
        return [customer_to_domain(row) for row in rows]

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        """Get customer by ID.

        Args:
            customer_id: Customer ID

        Returns:
            Customer or None if not found
        """
        row = self.db.fetch_one("SELECT * FROM customers WHERE id = :p1", [customer_id], self.columns)
        return customer_to_domain(row) if row is not None else None

    def get_customer_history(
        self, customer_id: int, limit: int = CUSTOMER_HISTORY_LIMIT
    ) -> Optional[CustomerHistory]:
        """Get a customer and their most recent records.

        Records are matched on the customer's name, since records store the
        name as free text.

        Args:
            customer_id: Customer ID
            limit: Maximum number of records to return

        Returns:
            CustomerHistory or None if the customer does not exist
        """
        customer = self.get_customer(customer_id)
        if customer is None:
            return None
        records = self.records.list_for_customer(customer.name, limit)
        return CustomerHistory(customer=customer, records=tuple(records))

    def create_customer(
        self, name: str, phone: Optional[str] = None, email: Optional[str] = None
    ) -> Customer:
        """Create a new customer.

        Args:
            name: Customer name, unique
            phone: Optional phone number
            email: Optional email address

        Returns:
            The created customer

        Raises:
            ConflictError: If a customer with this name already exists
        """
        try:
            row = self.db.insert_row("customers", {"name": name, "phone": phone, "email": email})
        except StoreError as error:
            if error.is_unique_violation:
                raise ConflictError(duplicate_name("Customer")) from error
            raise
        return customer_to_domain(row)
