# pos_backend/repositories/product_repository.py

from sqlalchemy import update
from sqlalchemy.orm import Session, joinedload

from pos_backend.models.products import Product
from pos_backend.models.transaction_details import TransactionDetail


class ProductRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self, name: str | None = None) -> list[Product]:
        query = self.db.query(Product).options(joinedload(Product.category))

        if name:
            query = query.filter(Product.name.icontains(name, autoescape=True))

        return query.order_by(Product.id).all()

    def get_by_id(self, product_id: int) -> Product | None:
        return (
            self.db.query(Product)
            .options(joinedload(Product.category))
            .filter(Product.id == product_id)
            .first()
        )

    def get_many_for_update(self, product_ids) -> dict[int, Product]:
        """Load products keyed by id, row-locked until the session ends.

        Ids with no matching row are simply absent from the result.
        """
        ids = sorted(set(product_ids))
        if not ids:
            return {}

        products = (
            self.db.query(Product)
            .filter(Product.id.in_(ids))
            .order_by(Product.id)
            .with_for_update()
            .all()
        )
        return {product.id: product for product in products}

    def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Take `quantity` units out of stock unless that would go negative.

        Returns False when the row no longer holds enough stock.
        """
        result = self.db.execute(
            update(Product)
            .where(Product.id == product_id, Product.stock >= quantity)
            .values(stock=Product.stock - quantity)
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    def has_sales(self, product_id: int) -> bool:
        return self.db.query(
            self.db.query(TransactionDetail)
            .filter(TransactionDetail.product_id == product_id)
            .exists()
        ).scalar()

    def add(self, product: Product) -> Product:
        self.db.add(product)
        self.db.flush()
        return product

    def delete(self, product: Product):
        self.db.delete(product)
        self.db.flush()
