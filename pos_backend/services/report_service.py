# pos_backend/services/report_service.py

from datetime import date, datetime, time, timedelta, timezone

from sqlalchemy.orm import Session

from pos_backend.core.exceptions import ValidationError
from pos_backend.repositories.report_repository import ReportRepository
from pos_backend.schemas.report import BestSellingProduct, ReportResponse


def _day_bounds(start_date: date, end_date: date):
    # Inclusive calendar dates as a half-open UTC timestamp range
    start_dt = datetime.combine(start_date, time.min, tzinfo=timezone.utc)
    end_dt = datetime.combine(end_date + timedelta(days=1), time.min, tzinfo=timezone.utc)
    return start_dt, end_dt


class ReportService:
    def __init__(self, db: Session, reports: ReportRepository | None = None):
        self.reports = reports or ReportRepository(db)

    def get_today_report(self) -> ReportResponse:
        today = datetime.now(timezone.utc).date()
        return self._build_report(today, today)

    def get_report_by_date_range(self, start_date: date, end_date: date) -> ReportResponse:
        if start_date > end_date:
            raise ValidationError("start_date must not be after end_date")
        return self._build_report(start_date, end_date)

    def _build_report(self, start_date: date, end_date: date) -> ReportResponse:
        start_dt, end_dt = _day_bounds(start_date, end_date)

        total_revenue, total_transactions = self.reports.get_totals(start_dt, end_dt)

        best_product = BestSellingProduct()
        best = self.reports.get_best_product(start_dt, end_dt)
        if best is not None:
            name, qty_sold = best
            best_product = BestSellingProduct(name=name, qty_sold=qty_sold)

        return ReportResponse(
            total_revenue=total_revenue,
            total_transactions=total_transactions,
            best_product=best_product,
        )
