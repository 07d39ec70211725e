"""Record endpoints."""

from datetime import date

from fastapi import APIRouter, Depends

from salonbook.api.dependencies import get_record_service
from salonbook.api.schemas import RecordCreate
from salonbook.domain.errors import NotFoundError, not_found
from salonbook.domain.record import RecordService

router = APIRouter()


@router.post("/records")
def create_record(payload: RecordCreate, records: RecordService = Depends(get_record_service)):
    return records.create_record(**payload.model_dump())


@router.get("/records/daily/{day}")
def list_daily_records(day: date, records: RecordService = Depends(get_record_service)):
    return records.list_daily(day)


@router.get("/records/monthly/{year}/{month}")
def list_monthly_records(
    year: int, month: int, records: RecordService = Depends(get_record_service)
):
    return records.list_monthly(year, month)


@router.delete("/records/{record_id}")
def delete_record(record_id: int, records: RecordService = Depends(get_record_service)):
    record = records.delete_record(record_id)
    if record is None:
        raise NotFoundError(not_found("Record"))
    return {"message": "Record deleted successfully", "record": record}
