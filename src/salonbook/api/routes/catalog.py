"""Service, staff and expense type endpoints.

DELETE deactivates the row and returns it; rows are never removed.
"""

from fastapi import APIRouter, Depends, Query

from salonbook.api.dependencies import (
    get_expense_type_service,
    get_service_catalog,
    get_staff_service,
)
from salonbook.api.schemas import NameCreate
from salonbook.domain.errors import NotFoundError, not_found
from salonbook.domain.reference_data import ExpenseTypeService, ServiceCatalog, StaffService

router = APIRouter()


@router.get("/services")
def list_services(
    include_inactive: bool = Query(False, alias="includeInactive"),
    services: ServiceCatalog = Depends(get_service_catalog),
):
    return services.list_items(include_inactive)


@router.post("/services")
def create_service(payload: NameCreate, services: ServiceCatalog = Depends(get_service_catalog)):
    return services.create(payload.name)


@router.delete("/services/{service_id}")
def deactivate_service(service_id: int, services: ServiceCatalog = Depends(get_service_catalog)):
    service = services.deactivate(service_id)
    if service is None:
        raise NotFoundError(not_found("Service"))
    return service


@router.get("/staff")
def list_staff(
    include_inactive: bool = Query(False, alias="includeInactive"),
    staff: StaffService = Depends(get_staff_service),
):
    return staff.list_items(include_inactive)


@router.post("/staff")
def create_staff_member(payload: NameCreate, staff: StaffService = Depends(get_staff_service)):
    return staff.create(payload.name)


@router.delete("/staff/{staff_id}")
def deactivate_staff_member(staff_id: int, staff: StaffService = Depends(get_staff_service)):
    member = staff.deactivate(staff_id)
    if member is None:
        raise NotFoundError(not_found("Staff member"))
    return member


@router.get("/expense-types")
def list_expense_types(
    include_inactive: bool = Query(False, alias="includeInactive"),
    expense_types: ExpenseTypeService = Depends(get_expense_type_service),
):
    return expense_types.list_items(include_inactive)
