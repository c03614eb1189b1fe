# pos_backend/core/dependencies.py
#
# Service providers for the routers. Tests swap these (or get_db) out
# through app.dependency_overrides.

from fastapi import Depends
from sqlalchemy.orm import Session

from pos_backend.database import get_db
from pos_backend.services.category_service import CategoryService
from pos_backend.services.product_service import ProductService
from pos_backend.services.report_service import ReportService
from pos_backend.services.transaction_service import TransactionService


def get_category_service(db: Session = Depends(get_db)) -> CategoryService:
    return CategoryService(db)


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    return ProductService(db)


def get_transaction_service(db: Session = Depends(get_db)) -> TransactionService:
    return TransactionService(db)


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(db)
