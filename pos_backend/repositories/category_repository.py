# pos_backend/repositories/category_repository.py

from sqlalchemy.orm import Session

from pos_backend.models.categories import Category
from pos_backend.models.products import Product


class CategoryRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_all(self) -> list[Category]:
        return self.db.query(Category).order_by(Category.id).all()

    def get_by_id(self, category_id: int) -> Category | None:
        return self.db.query(Category).filter(Category.id == category_id).first()

    def exists(self, category_id: int) -> bool:
        return self.db.query(
            self.db.query(Category).filter(Category.id == category_id).exists()
        ).scalar()

    def has_products(self, category_id: int) -> bool:
        return self.db.query(
            self.db.query(Product).filter(Product.category_id == category_id).exists()
        ).scalar()

    def add(self, category: Category) -> Category:
        self.db.add(category)
        self.db.flush()
        return category

    def delete(self, category: Category):
        self.db.delete(category)
        self.db.flush()
