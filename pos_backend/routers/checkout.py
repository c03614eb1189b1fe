# =========================================================
# CHECKOUT + TRANSACTION HISTORY ROUTER
#
# POST /api/checkout is all-or-nothing: either the whole cart
# is recorded and stock decremented, or nothing is written.
# Transactions are read-only once created.
# =========================================================

from fastapi import APIRouter, Depends, Path, Query, Request, status

from pos_backend.core.config import settings
from pos_backend.core.dependencies import get_transaction_service
from pos_backend.core.rate_limiter import limiter
from pos_backend.schemas.limits import MAX_ID, MAX_OFFSET
from pos_backend.schemas.transaction import CheckoutRequest, TransactionResponse
from pos_backend.services.transaction_service import TransactionService

router = APIRouter(prefix="/api", tags=["Transactions"])


@router.post(
    "/checkout",
    response_model=TransactionResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(settings.CHECKOUT_RATE_LIMIT)
def checkout(
    request: Request,
    checkout_data: CheckoutRequest,
    service: TransactionService = Depends(get_transaction_service),
):
    return service.checkout(checkout_data.items)


@router.get("/transactions", response_model=list[TransactionResponse])
def list_transactions(
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0, le=MAX_OFFSET),
    service: TransactionService = Depends(get_transaction_service),
):
    return service.get_all(limit=limit, offset=offset)


@router.get("/transactions/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int = Path(..., ge=1, le=MAX_ID),
    service: TransactionService = Depends(get_transaction_service),
):
    return service.get_by_id(transaction_id)
