# pos_backend/routers/products.py

from fastapi import APIRouter, Depends, Path, Query, status

from pos_backend.core.dependencies import get_product_service
from pos_backend.schemas.limits import MAX_ID
from pos_backend.schemas.product import (
    ProductCreate,
    ProductUpdate,
    ProductResponse,
)
from pos_backend.services.product_service import ProductService

router = APIRouter(
    prefix="/api/products",
    tags=["Products"],
)


@router.get("", response_model=list[ProductResponse])
def list_products(
    name: str | None = Query(None, description="Case-insensitive name filter"),
    service: ProductService = Depends(get_product_service),
):
    return service.get_all(name)


@router.post(
    "",
    response_model=ProductResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_product(
    product_data: ProductCreate,
    service: ProductService = Depends(get_product_service),
):
    return service.create(product_data)


@router.get("/{product_id}", response_model=ProductResponse)
def get_product(
    product_id: int = Path(..., ge=1, le=MAX_ID),
    service: ProductService = Depends(get_product_service),
):
    return service.get_by_id(product_id)


@router.put("/{product_id}", response_model=ProductResponse)
def update_product(
    *,
    product_id: int = Path(..., ge=1, le=MAX_ID),
    product_data: ProductUpdate,
    service: ProductService = Depends(get_product_service),
):
    return service.update(product_id, product_data)


@router.delete("/{product_id}")
def delete_product(
    product_id: int = Path(..., ge=1, le=MAX_ID),
    service: ProductService = Depends(get_product_service),
):
    service.delete(product_id)
    return {"message": "Product deleted successfully"}
