# pos_backend/repositories/report_repository.py

from datetime import datetime

from sqlalchemy import func
from sqlalchemy.orm import Session

from pos_backend.models.products import Product
from pos_backend.models.transactions import Transaction
from pos_backend.models.transaction_details import TransactionDetail


class ReportRepository:
    """Aggregate queries over transactions created in [start_dt, end_dt)."""

    def __init__(self, db: Session):
        self.db = db

    def get_totals(self, start_dt: datetime, end_dt: datetime) -> tuple[int, int]:
        total_revenue, total_transactions = (
            self.db.query(
                func.coalesce(func.sum(Transaction.total_amount), 0),
                func.count(Transaction.id),
            )
            .filter(
                Transaction.created_at >= start_dt,
                Transaction.created_at < end_dt,
            )
            .one()
        )
        return int(total_revenue), int(total_transactions)

    def get_best_product(self, start_dt: datetime, end_dt: datetime):
        """Return (name, qty_sold) of the top seller, or None if nothing sold."""
        qty_sold = func.sum(TransactionDetail.quantity).label("qty_sold")

        row = (
            self.db.query(Product.name, qty_sold)
            .join(TransactionDetail, TransactionDetail.product_id == Product.id)
            .join(Transaction, TransactionDetail.transaction_id == Transaction.id)
            .filter(
                Transaction.created_at >= start_dt,
                Transaction.created_at < end_dt,
            )
            .group_by(Product.id, Product.name)
            .order_by(qty_sold.desc())
            .first()
        )

        if row is None:
            return None

        return row.name, int(row.qty_sold)
