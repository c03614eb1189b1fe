# pos_backend/routers/categories.py

from fastapi import APIRouter, Depends, Path, status

from pos_backend.core.dependencies import get_category_service
from pos_backend.schemas.limits import MAX_ID
from pos_backend.schemas.category import (
    CategoryCreate,
    CategoryUpdate,
    CategoryResponse,
)
from pos_backend.services.category_service import CategoryService

router = APIRouter(
    prefix="/api/categories",
    tags=["Categories"],
)


@router.get("", response_model=list[CategoryResponse])
def list_categories(service: CategoryService = Depends(get_category_service)):
    return service.get_all()


@router.post(
    "",
    response_model=CategoryResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_category(
    category_data: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
):
    return service.create(category_data)


@router.get("/{category_id}", response_model=CategoryResponse)
def get_category(
    category_id: int = Path(..., ge=1, le=MAX_ID),
    service: CategoryService = Depends(get_category_service),
):
    return service.get_by_id(category_id)


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    *,
    category_id: int = Path(..., ge=1, le=MAX_ID),
    category_data: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
):
    return service.update(category_id, category_data)


@router.delete("/{category_id}")
def delete_category(
    category_id: int = Path(..., ge=1, le=MAX_ID),
    service: CategoryService = Depends(get_category_service),
):
    service.delete(category_id)
    return {"message": "Category deleted successfully"}
