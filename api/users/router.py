"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from auth import dependencies as auth_dependencies
from auth import service as auth_service
from core.pagination import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    MAX_LIMIT,
    MAX_PAGE,
    PageWindow,
    parse_positive_int,
)

from . import schemas, service

router = APIRouter(prefix="/api/users")


@router.get("/check-role/{email}")
async def check_role(email: str) -> dict:
    return await service.check_role(email)


@router.get("")
async def list_users(
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    role: str = Query(default="", max_length=20),
    search: str = Query(default="", max_length=200),
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    window = PageWindow(
        page=parse_positive_int(page, DEFAULT_PAGE, MAX_PAGE),
        limit=parse_positive_int(limit, DEFAULT_LIMIT, MAX_LIMIT),
    )
    return await service.list_users(window, role=role, search=search)


# Registered before "/{email}" so "stats" is not read as an email.
@router.get("/stats/summary")
async def stats_summary(_: dict = Depends(auth_dependencies.require_admin)) -> dict:
    return await service.stats_summary()


@router.get("/{email}")
async def get_user(email: str) -> dict:
    return await service.get_user(email)


@router.post("")
async def save_user(request: schemas.SaveUserRequest) -> JSONResponse:
    status_code, body = await service.save_user(request)
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


@router.put("/{email}")
async def update_profile(
    email: str,
    request: schemas.UpdateProfileRequest,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    role = await auth_service.role_of(current_user["email"])
    return await service.update_profile(
        email,
        request,
        current_user=current_user,
        is_admin=role in auth_dependencies.ADMIN_ROLES,
    )


@router.patch("/{email}/role")
async def update_role(
    email: str,
    request: schemas.UpdateRoleRequest,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    return await service.update_role(email, request.role)


@router.delete("/{email}")
async def delete_user(
    email: str,
    current_user: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    return await service.delete_user(email, current_user=current_user)
