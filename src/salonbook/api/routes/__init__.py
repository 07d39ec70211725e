"""API routers, mounted under /api."""

from salonbook.api.routes import catalog, customers, expenses, records, reports

ROUTERS = [
    (records.router, "Records"),
    (expenses.router, "Expenses"),
    (customers.router, "Customers"),
    (catalog.router, "Reference data"),
    (reports.router, "Reports"),
]

__all__ = ["ROUTERS"]
