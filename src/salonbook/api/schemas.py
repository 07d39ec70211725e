"""Request bodies accepted by the API."""

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel


class RecordCreate(BaseModel):
    date: date
    customer_name: Optional[str] = None
    service: Optional[str] = None
    staff: Optional[str] = None
    price: Decimal
    payment_type: str


class ExpenseCreate(BaseModel):
    date: date
    type: str
    description: Optional[str] = None
    amount: Decimal
    payment_type: str


class CustomerCreate(BaseModel):
    name: str
    phone: Optional[str] = None
    email: Optional[str] = None


class NameCreate(BaseModel):
    """Body for creating a service or staff member."""

    name: str
