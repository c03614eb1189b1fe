# pos_backend/repositories/transaction_repository.py

from sqlalchemy.orm import Session, selectinload

from pos_backend.models.transactions import Transaction
from pos_backend.models.transaction_details import TransactionDetail


class TransactionRepository:
    def __init__(self, db: Session):
        self.db = db

    def create(self, total_amount: int, details: list[TransactionDetail]) -> Transaction:
        txn = Transaction(total_amount=total_amount, items=details)
        self.db.add(txn)
        self.db.flush()
        return txn

    def get_by_id(self, transaction_id: int) -> Transaction | None:
        return (
            self.db.query(Transaction)
            .options(selectinload(Transaction.items))
            .filter(Transaction.id == transaction_id)
            .first()
        )

    def get_all(self, limit: int, offset: int) -> list[Transaction]:
        return (
            self.db.query(Transaction)
            .options(selectinload(Transaction.items))
            .order_by(Transaction.created_at.desc(), Transaction.id.desc())
            .limit(limit)
            .offset(offset)
            .all()
        )
