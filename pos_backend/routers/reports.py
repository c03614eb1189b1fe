# pos_backend/routers/reports.py

from datetime import date

from fastapi import APIRouter, Depends, Query

from pos_backend.core.dependencies import get_report_service
from pos_backend.schemas.report import ReportResponse
from pos_backend.services.report_service import ReportService

router = APIRouter(prefix="/api/report", tags=["Reports"])


# =========================================================
# TODAY (UTC CALENDAR DAY)
# =========================================================
@router.get("/today", response_model=ReportResponse)
def today_report(service: ReportService = Depends(get_report_service)):
    return service.get_today_report()


# =========================================================
# DATE RANGE (BOTH ENDS INCLUSIVE)
# =========================================================
@router.get("", response_model=ReportResponse)
def date_range_report(
    start_date: date = Query(..., description="YYYY-MM-DD"),
    end_date: date = Query(..., description="YYYY-MM-DD"),
    service: ReportService = Depends(get_report_service),
):
    return service.get_report_by_date_range(start_date, end_date)
