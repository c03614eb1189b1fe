from pydantic import BaseModel, Field

from pos_backend.schemas.limits import MAX_ID, MAX_PRICE, MAX_STOCK


class ProductCreate(BaseModel):
    name: str = Field(..., min_length=1)

    price: int = Field(
        ...,
        gt=0,
        lt=MAX_PRICE,
        description="Unit price in the smallest currency unit, below 100 million"
    )

    stock: int = Field(0, ge=0, le=MAX_STOCK)

    category_id: int = Field(..., ge=1, le=MAX_ID)

    class Config:
        extra = "forbid"


class ProductUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    price: int | None = Field(None, gt=0, lt=MAX_PRICE)
    stock: int | None = Field(None, ge=0, le=MAX_STOCK)
    category_id: int | None = Field(None, ge=1, le=MAX_ID)

    class Config:
        extra = "forbid"


class ProductResponse(BaseModel):
    id: int
    name: str
    price: int
    stock: int
    category_id: int
    category_name: str | None = None

    class Config:
        from_attributes = True
