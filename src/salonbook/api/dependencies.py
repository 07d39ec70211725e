"""FastAPI dependencies that hand each request its services."""

from fastapi import Depends, Request

from salonbook.database.base import Database
from salonbook.domain.customer import CustomerService
from salonbook.domain.expense import ExpenseService
from salonbook.domain.record import RecordService
from salonbook.domain.reference_data import ExpenseTypeService, ServiceCatalog, StaffService
from salonbook.domain.reports import ReportService


def get_db(request: Request) -> Database:
    return request.app.state.db


def get_record_service(db: Database = Depends(get_db)) -> RecordService:
    return RecordService(db)


def get_expense_service(db: Database = Depends(get_db)) -> ExpenseService:
    return ExpenseService(db)


def get_customer_service(db: Database = Depends(get_db)) -> CustomerService:
    return CustomerService(db)


def get_service_catalog(db: Database = Depends(get_db)) -> ServiceCatalog:
    return ServiceCatalog(db)


def get_staff_service(db: Database = Depends(get_db)) -> StaffService:
    return StaffService(db)


def get_expense_type_service(db: Database = Depends(get_db)) -> ExpenseTypeService:
    return ExpenseTypeService(db)


def get_report_service(db: Database = Depends(get_db)) -> ReportService:
    return ReportService(db)
