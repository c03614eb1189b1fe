# =========================================================
# CHECKOUT SERVICE
#
# One checkout is one unit of work:
# - products are loaded (row-locked where the backend allows it)
# - the whole cart is validated before anything is written
# - header, line items and stock decrements commit together
#
# Stock is decremented with a conditional UPDATE, so a concurrent
# checkout that drained the stock after validation turns into
# InsufficientStockError and the whole transaction rolls back.
# =========================================================

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pos_backend.core.exceptions import (
    AppError,
    InsufficientStockError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from pos_backend.models.transactions import Transaction
from pos_backend.models.transaction_details import TransactionDetail
from pos_backend.repositories.product_repository import ProductRepository
from pos_backend.repositories.transaction_repository import TransactionRepository
from pos_backend.schemas.transaction import CheckoutItem

logger = logging.getLogger("pos_backend")


class TransactionService:
    def __init__(
        self,
        db: Session,
        products: ProductRepository | None = None,
        transactions: TransactionRepository | None = None,
    ):
        self.db = db
        self.products = products or ProductRepository(db)
        self.transactions = transactions or TransactionRepository(db)

    def checkout(self, items: list[CheckoutItem]) -> Transaction:
        if not items:
            raise ValidationError("Checkout must contain items")

        # Same product may appear on several lines; stock covers the sum
        requested = {}
        for item in items:
            if item.quantity <= 0:
                raise ValidationError("Item quantity must be greater than zero")
            requested[item.product_id] = requested.get(item.product_id, 0) + item.quantity

        try:
            products = self.products.get_many_for_update(requested.keys())

            for product_id in requested:
                if product_id not in products:
                    raise NotFoundError(f"Product {product_id} not found")

            for product_id, quantity in requested.items():
                product = products[product_id]
                if quantity > product.stock:
                    raise InsufficientStockError(product.name)

            total_amount = 0
            details = []

            for item in items:
                product = products[item.product_id]
                line_total = product.price * item.quantity
                total_amount += line_total

                details.append(
                    TransactionDetail(
                        product_id=product.id,
                        product_name=product.name,
                        unit_price=product.price,
                        quantity=item.quantity,
                        line_total=line_total,
                    )
                )

            txn = self.transactions.create(total_amount, details)

            for product_id, quantity in requested.items():
                if not self.products.decrement_stock(product_id, quantity):
                    raise InsufficientStockError(products[product_id].name)

            self.db.commit()

        except AppError as e:
            self.db.rollback()
            logger.warning(f"Checkout rejected: {e.detail}")
            raise

        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Checkout failed: {e}")
            raise PersistenceError("Unable to complete checkout")

        logger.info(
            f"Checkout completed: transaction {txn.id} "
            f"items={len(details)} total={total_amount}"
        )

        return self.get_by_id(txn.id)

    def get_by_id(self, transaction_id: int) -> Transaction:
        txn = self.transactions.get_by_id(transaction_id)
        if not txn:
            raise NotFoundError("Transaction not found")
        return txn

    def get_all(self, limit: int = 20, offset: int = 0) -> list[Transaction]:
        return self.transactions.get_all(limit, offset)
