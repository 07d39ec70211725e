"""Customer endpoints."""

from fastapi import APIRouter, Depends

from salonbook.api.dependencies import get_customer_service
from salonbook.api.schemas import CustomerCreate
from salonbook.domain.customer import CustomerService
from salonbook.domain.errors import NotFoundError, not_found

router = APIRouter()


@router.get("/customers")
def list_customers(customers: CustomerService = Depends(get_customer_service)):
    return customers.list_customers()


@router.get("/customers/{customer_id}")
def get_customer(customer_id: int, customers: CustomerService = Depends(get_customer_service)):
    history = customers.get_customer_history(customer_id)
    if history is None:
        raise NotFoundError(not_found("Customer"))
    return {"customer": history.customer, "records": list(history.records)}


@router.post("/customers")
def create_customer(
    payload: CustomerCreate, customers: CustomerService = Depends(get_customer_service)
):
    return customers.create_customer(**payload.model_dump())
