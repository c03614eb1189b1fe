# pos_backend/services/product_service.py

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pos_backend.core.exceptions import NotFoundError, PersistenceError, ValidationError
from pos_backend.models.products import Product
from pos_backend.repositories.category_repository import CategoryRepository
from pos_backend.repositories.product_repository import ProductRepository
from pos_backend.schemas.product import ProductCreate, ProductUpdate

logger = logging.getLogger("pos_backend")


class ProductService:
    def __init__(
        self,
        db: Session,
        products: ProductRepository | None = None,
        categories: CategoryRepository | None = None,
    ):
        self.db = db
        self.products = products or ProductRepository(db)
        self.categories = categories or CategoryRepository(db)

    def get_all(self, name: str | None = None) -> list[Product]:
        return self.products.get_all(name)

    def get_by_id(self, product_id: int) -> Product:
        product = self.products.get_by_id(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    def create(self, data: ProductCreate) -> Product:
        if not self.categories.exists(data.category_id):
            raise ValidationError("Category not found")

        product = Product(
            name=data.name,
            price=data.price,
            stock=data.stock,
            category_id=data.category_id,
        )

        try:
            self.products.add(product)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create product: {e}")
            raise PersistenceError("Unable to create product")

        self.db.refresh(product)
        return product

    def update(self, product_id: int, data: ProductUpdate) -> Product:
        product = self.get_by_id(product_id)

        if data.category_id is not None and data.category_id != product.category_id:
            if not self.categories.exists(data.category_id):
                raise ValidationError("Category not found")

        for field, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(product, field, value)

        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update product {product_id}: {e}")
            raise PersistenceError("Unable to update product")

        self.db.refresh(product)
        return product

    def delete(self, product_id: int):
        product = self.get_by_id(product_id)

        # Line items keep pointing at the product
        if self.products.has_sales(product_id):
            raise ValidationError("Product has transaction history and cannot be deleted")

        try:
            self.products.delete(product)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete product {product_id}: {e}")
            raise PersistenceError("Unable to delete product")
