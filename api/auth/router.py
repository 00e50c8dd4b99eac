"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from . import dependencies, schemas, service

router = APIRouter(prefix="/api/auth")


@router.get("/me", response_model=schemas.MeResponse)
async def me(current_user: dict = Depends(dependencies.get_current_user)) -> schemas.MeResponse:
    return await service.me(current_user)
