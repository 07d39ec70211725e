"""Default reference data inserted into an empty database."""

import logging

from salonbook.database.base import Database

logger = logging.getLogger(__name__)

DEFAULT_SERVICES = [
    "Haircut",
    "Beard",
    "Haircut & Beard",
    "Hair Care",
    "Product",
    "Coloring",
    "Manicure",
    "Pedicure",
    "Manicure & Pedicure",
    "Waxing",
    "Eyebrows",
]

DEFAULT_STAFF = [
    "Head Barber",
    "Barber",
    "Manicurist",
    "Apprentice",
]

DEFAULT_EXPENSE_TYPES = [
    "Rent",
    "Electricity Bill",
    "Water Bill",
    "Gas Bill",
    "Social Security Contributions",
    "Internet & Phone Bill",
    "Loan Repayment",
    "Dry Cleaning",
    "Accounting & Legal",
    "General Expenses",
    "Food & Drink",
    "Supplies",
    "Salaries & Advances",
]

DEFAULTS = {
    "services": DEFAULT_SERVICES,
    "staff": DEFAULT_STAFF,
    "expense_types": DEFAULT_EXPENSE_TYPES,
}


def seed_defaults(db: Database) -> dict[str, int]:
    """Insert default names into each reference table that is still empty.

    Args:
        db: Database instance with the schema already created

    Returns:
        Mapping of table name to number of rows inserted
    """

    def seed(scope) -> dict[str, int]:
        inserted = {}
        for table, names in DEFAULTS.items():
            row = scope.fetch_one(f"SELECT COUNT(*) AS count FROM {table}")
            if row is not None and row["count"]:
                inserted[table] = 0
                continue
            for name in names:
                scope.insert_row(table, {"name": name, "active": True})
            inserted[table] = len(names)
        return inserted

    inserted = db.run_in_transaction(seed)
    for table, count in inserted.items():
        if count:
            logger.info("Added %d default rows to %s", count, table)
    return inserted
