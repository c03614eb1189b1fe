# schemas/transaction.py

from pydantic import BaseModel, Field
from datetime import datetime
from typing import List

from pos_backend.schemas.limits import MAX_CHECKOUT_ITEMS, MAX_ID, MAX_QUANTITY


class CheckoutItem(BaseModel):
    product_id: int = Field(..., ge=1, le=MAX_ID)
    quantity: int = Field(..., gt=0, le=MAX_QUANTITY)


class CheckoutRequest(BaseModel):
    items: List[CheckoutItem] = Field(..., min_length=1, max_length=MAX_CHECKOUT_ITEMS)


class TransactionDetailResponse(BaseModel):
    id: int
    product_id: int
    product_name: str
    quantity: int
    unit_price: int
    line_total: int

    class Config:
        from_attributes = True


class TransactionResponse(BaseModel):
    id: int
    total_amount: int
    created_at: datetime
    items: List[TransactionDetailResponse]

    class Config:
        from_attributes = True
