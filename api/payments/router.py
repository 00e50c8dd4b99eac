"""
Payment API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from auth import dependencies as auth_dependencies

from . import service

router = APIRouter(prefix="/api/payments")


class PaymentIntentRequest(BaseModel):
    # Major currency units (e.g. dollars).
    amount: float = Field(..., gt=0, le=1_000_000)
    applicationId: str | None = Field(default=None, max_length=64)


@router.post("/create-payment-intent")
async def create_payment_intent(
    request: PaymentIntentRequest,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.create_payment_intent(
        request.amount,
        current_user=current_user,
        application_id=request.applicationId,
    )
