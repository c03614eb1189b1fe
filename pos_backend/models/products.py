# pos_backend/models/products.py

from sqlalchemy import CheckConstraint, Column, Index, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from pos_backend.database import Base


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    # Smallest currency unit
    price = Column(Integer, nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False)

    category = relationship("Category", back_populates="products")

    @property
    def category_name(self):
        return self.category.name if self.category else None

    __table_args__ = (
        Index("ix_products_category", "category_id"),
        CheckConstraint("price > 0", name="ck_products_price_positive"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )
