"""Report endpoints."""

from datetime import date

from fastapi import APIRouter, Depends

from salonbook.api.dependencies import get_report_service
from salonbook.api.serializers import daily_summary_to_json
from salonbook.domain.reports import ReportService

router = APIRouter()


@router.get("/reports/daily-summary/{day}")
def daily_summary(day: date, reports: ReportService = Depends(get_report_service)):
    return daily_summary_to_json(reports.daily_summary(day))


@router.get("/reports/staff-performance/{start_date}/{end_date}")
def staff_performance(
    start_date: date, end_date: date, reports: ReportService = Depends(get_report_service)
):
    return reports.staff_performance(start_date, end_date)


@router.get("/reports/service-analysis/{start_date}/{end_date}")
def service_analysis(
    start_date: date, end_date: date, reports: ReportService = Depends(get_report_service)
):
    return reports.service_analysis(start_date, end_date)
