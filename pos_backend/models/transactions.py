# pos_backend/models/transactions.py

from datetime import datetime, timezone

from sqlalchemy import BigInteger, Column, Integer, DateTime
from sqlalchemy.orm import relationship

from pos_backend.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class Transaction(Base):
    """Checkout receipt header.

    Written once together with its details and never updated afterwards.
    `total_amount` is the sum of the details' `line_total`.
    """

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)

    total_amount = Column(BigInteger, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        default=_utcnow,
        nullable=False,
        index=True,
    )

    items = relationship(
        "TransactionDetail",
        back_populates="transaction",
        cascade="all, delete-orphan",
        order_by="TransactionDetail.id",
    )
