"""Expense endpoints."""

from datetime import date

from fastapi import APIRouter, Depends

from salonbook.api.dependencies import get_expense_service
from salonbook.api.schemas import ExpenseCreate
from salonbook.domain.errors import NotFoundError, not_found
from salonbook.domain.expense import ExpenseService

router = APIRouter()


@router.post("/expenses")
def create_expense(
    payload: ExpenseCreate, expenses: ExpenseService = Depends(get_expense_service)
):
    return expenses.create_expense(**payload.model_dump())


@router.get("/expenses/daily/{day}")
def list_daily_expenses(day: date, expenses: ExpenseService = Depends(get_expense_service)):
    return expenses.list_daily(day)


@router.get("/expenses/monthly/{year}/{month}")
def list_monthly_expenses(
    year: int, month: int, expenses: ExpenseService = Depends(get_expense_service)
):
    return expenses.list_monthly(year, month)


@router.delete("/expenses/{expense_id}")
def delete_expense(expense_id: int, expenses: ExpenseService = Depends(get_expense_service)):
    expense = expenses.delete_expense(expense_id)
    if expense is None:
        raise NotFoundError(not_found("Expense"))
    return {"message": "Expense deleted successfully", "expense": expense}
