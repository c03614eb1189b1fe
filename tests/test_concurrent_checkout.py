"""Overselling checks against a file-backed SQLite database.

Two sessions on separate connections play two tills selling the last unit
of a product. The rival checkout runs and commits after the first one has
already read (and validated against) the old stock level.
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from pos_backend.core.exceptions import InsufficientStockError
from pos_backend.database import Base
from pos_backend.models import Category, Product, Transaction
from pos_backend.repositories.product_repository import ProductRepository
from pos_backend.schemas.transaction import CheckoutItem
from pos_backend.services.transaction_service import TransactionService


@pytest.fixture
def file_sessionmaker(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'pos.db'}")
    Base.metadata.create_all(bind=engine)
    try:
        yield sessionmaker(bind=engine, autoflush=False)
    finally:
        engine.dispose()


@pytest.fixture
def last_unit(file_sessionmaker):
    with file_sessionmaker() as db:
        category = Category(name="Drinks")
        db.add(category)
        db.flush()
        product = Product(name="Coffee", price=3500, stock=1, category_id=category.id)
        db.add(product)
        db.commit()
        return product.id


class RivalSellsFirst(ProductRepository):
    """Lets another till complete its checkout right after our read."""

    def __init__(self, db, rival):
        super().__init__(db)
        self.rival = rival
        self.rival_result = None

    def get_many_for_update(self, product_ids):
        products = super().get_many_for_update(product_ids)
        if self.rival_result is None:
            self.rival_result = self.rival()
        return products


def test_only_one_of_two_racing_checkouts_succeeds(file_sessionmaker, last_unit):
    items = [CheckoutItem(product_id=last_unit, quantity=1)]

    with file_sessionmaker() as till_a, file_sessionmaker() as till_b:
        rival_service = TransactionService(till_b)
        repo = RivalSellsFirst(till_a, rival=lambda: rival_service.checkout(items))
        service = TransactionService(till_a, products=repo)

        with pytest.raises(InsufficientStockError):
            service.checkout(items)

        assert repo.rival_result is not None
        assert repo.rival_result.total_amount == 3500

    with file_sessionmaker() as db:
        assert db.get(Product, last_unit).stock == 0
        assert db.query(Transaction).count() == 1


def test_sequential_checkouts_of_last_unit(file_sessionmaker, last_unit):
    items = [CheckoutItem(product_id=last_unit, quantity=1)]

    with file_sessionmaker() as till_a, file_sessionmaker() as till_b:
        TransactionService(till_a).checkout(items)

        with pytest.raises(InsufficientStockError):
            TransactionService(till_b).checkout(items)

    with file_sessionmaker() as db:
        assert db.get(Product, last_unit).stock == 0
        assert db.query(Transaction).count() == 1
