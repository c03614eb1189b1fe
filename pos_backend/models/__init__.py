from pos_backend.models.categories import Category
from pos_backend.models.products import Product
from pos_backend.models.transactions import Transaction
from pos_backend.models.transaction_details import TransactionDetail

__all__ = ["Category", "Product", "Transaction", "TransactionDetail"]
