"""Domain layer for salonbook application."""

# Services import the database layer, which imports domain entities, so the
# services are exposed lazily.
_SERVICES = {
    "CustomerService": "salonbook.domain.customer",
    "RecordService": "salonbook.domain.record",
    "ExpenseService": "salonbook.domain.expense",
    "ReportService": "salonbook.domain.reports",
    "ServiceCatalog": "salonbook.domain.reference_data",
    "StaffService": "salonbook.domain.reference_data",
    "ExpenseTypeService": "salonbook.domain.reference_data",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
