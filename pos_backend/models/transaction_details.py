# pos_backend/models/transaction_details.py

from sqlalchemy import BigInteger, Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from pos_backend.database import Base


class TransactionDetail(Base):
    __tablename__ = "transaction_details"

    id = Column(Integer, primary_key=True, index=True)

    transaction_id = Column(Integer, ForeignKey("transactions.id"), nullable=False, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)

    # Snapshots taken at checkout time
    product_name = Column(String, nullable=False)
    unit_price = Column(Integer, nullable=False)

    quantity = Column(Integer, nullable=False)
    line_total = Column(BigInteger, nullable=False)

    transaction = relationship("Transaction", back_populates="items")
