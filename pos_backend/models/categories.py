# pos_backend/models/categories.py

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from pos_backend.database import Base


class Category(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    products = relationship("Product", back_populates="category")
