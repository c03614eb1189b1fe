from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1)

    class Config:
        extra = "forbid"


class CategoryUpdate(BaseModel):
    name: str = Field(..., min_length=1)

    class Config:
        extra = "forbid"


class CategoryResponse(BaseModel):
    id: int
    name: str

    class Config:
        from_attributes = True
