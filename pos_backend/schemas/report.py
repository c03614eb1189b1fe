# schemas/report.py

from pydantic import BaseModel


class BestSellingProduct(BaseModel):
    name: str = ""
    qty_sold: int = 0


class ReportResponse(BaseModel):
    total_revenue: int
    total_transactions: int
    best_product: BestSellingProduct
