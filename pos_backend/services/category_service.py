# pos_backend/services/category_service.py

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from pos_backend.core.exceptions import NotFoundError, PersistenceError, ValidationError
from pos_backend.models.categories import Category
from pos_backend.repositories.category_repository import CategoryRepository
from pos_backend.schemas.category import CategoryCreate, CategoryUpdate

logger = logging.getLogger("pos_backend")


class CategoryService:
    def __init__(self, db: Session, categories: CategoryRepository | None = None):
        self.db = db
        self.categories = categories or CategoryRepository(db)

    def get_all(self) -> list[Category]:
        return self.categories.get_all()

    def get_by_id(self, category_id: int) -> Category:
        category = self.categories.get_by_id(category_id)
        if not category:
            raise NotFoundError("Category not found")
        return category

    def create(self, data: CategoryCreate) -> Category:
        category = Category(name=data.name)
        try:
            self.categories.add(category)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to create category: {e}")
            raise PersistenceError("Unable to create category")

        self.db.refresh(category)
        return category

    def update(self, category_id: int, data: CategoryUpdate) -> Category:
        category = self.get_by_id(category_id)
        category.name = data.name
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to update category {category_id}: {e}")
            raise PersistenceError("Unable to update category")

        self.db.refresh(category)
        return category

    def delete(self, category_id: int):
        category = self.get_by_id(category_id)

        if self.categories.has_products(category_id):
            raise ValidationError("Category still has products")

        try:
            self.categories.delete(category)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to delete category {category_id}: {e}")
            raise PersistenceError("Unable to delete category")
