"""Reference data services: services, staff and expense types.

Reference rows are never deleted. Deactivating one clears its active flag,
which hides it from default listings while records and expenses keep the
name they were created with.
"""

from typing import Generic, Optional, Type, TypeVar

from salonbook.database.base import Database
from salonbook.database.errors import StoreError
from salonbook.database.mappers import reference_to_domain
from salonbook.database.models import column_types
from salonbook.domain.entities import ExpenseType, ReferenceItem, Service, StaffMember
from salonbook.domain.errors import ConflictError, duplicate_name

R = TypeVar("R", bound=ReferenceItem)


class ReferenceDataService(Generic[R]):
    """Service for one reference table."""

    table: str
    label: str
    entity: Type[R]

    def __init__(self, db: Database):
        """Initialize reference data service.

        Args:
            db: Database instance
        """
        self.db = db
        self.columns = column_types(self.table)

    def list_items(self, include_inactive: bool = False) -> list[R]:
        """List items ordered by name.

        Args:
            include_inactive: Also return deactivated items

        Returns:
            List of items
        """
        if include_inactive:
            rows = self.db.fetch_all(f"SELECT * FROM {self.table} ORDER BY name", (), self.columns)
        else:
            rows = self.db.fetch_all(
                f"SELECT * FROM {self.table} WHERE active = :p1 ORDER BY name", [True], self.columns
            )
        return [reference_to_domain(row, self.entity) for row in rows]

    def get(self, item_id: int) -> Optional[R]:
        """Get an item by id, active or not."""
        row = self.db.fetch_one(f"SELECT * FROM {self.table} WHERE id = :p1", [item_id], self.columns)
        return reference_to_domain(row, self.entity) if row is not None else None

    def create(self, name: str) -> R:
        """Create an active item.

        Raises:
            ConflictError: If an item with this exact name already exists
        """
        try:
            row = self.db.insert_row(self.table, {"name": name, "active": True})
        except StoreError as error:
            if error.is_unique_violation:
                raise ConflictError(duplicate_name(self.label)) from error
            raise
        return reference_to_domain(row, self.entity)

    def deactivate(self, item_id: int) -> Optional[R]:
        """Clear the active flag, returning the updated item or None if missing."""
        row = self.db.update_row(self.table, {"active": False}, {"id": item_id})
        return reference_to_domain(row, self.entity) if row is not None else None


class ServiceCatalog(ReferenceDataService[Service]):
    table = "services"
    label = "Service"
    entity = Service


class StaffService(ReferenceDataService[StaffMember]):
    table = "staff"
    label = "Staff member"
    entity = StaffMember


class ExpenseTypeService(ReferenceDataService[ExpenseType]):
    table = "expense_types"
    label = "Expense type"
    entity = ExpenseType
