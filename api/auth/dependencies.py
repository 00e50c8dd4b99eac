"""
Auth dependencies for protected FastAPI routes.
"""

from __future__ import annotations

from fastapi import Depends, Header, HTTPException, status

from . import service

ADMIN_ROLES = {"admin"}
STAFF_ROLES = {"admin", "moderator"}


def _extract_bearer_token(authorization: str | None) -> str:
    raw = (authorization or "").strip()
    if not raw:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized: No token provided",
        )

    parts = raw.split(" ", 1)
    if len(parts) != 2:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid Authorization header format.",
        )

    scheme, token = parts[0].strip().lower(), parts[1].strip()
    if scheme != "bearer" or not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization must be: Bearer <token>.",
        )
    return token


async def get_bearer_token(authorization: str | None = Header(default=None)) -> str:
    return _extract_bearer_token(authorization)


async def get_current_user(access_token: str = Depends(get_bearer_token)) -> dict:
    return await service.get_user_from_access_token(access_token)


async def require_admin(current_user: dict = Depends(get_current_user)) -> dict:
    return await service.require_role(
        current_user,
        ADMIN_ROLES,
        detail="Forbidden: Admin access required",
    )


async def require_moderator_or_admin(current_user: dict = Depends(get_current_user)) -> dict:
    return await service.require_role(
        current_user,
        STAFF_ROLES,
        detail="Forbidden: Moderator or Admin access required",
    )


async def is_staff(current_user: dict) -> bool:
    """
    For handlers that allow either the resource owner or staff.
    """
    return (await service.role_of(current_user["email"])) in STAFF_ROLES


def ensure_owner_or_staff(current_user: dict, owner_email: str, *, staff: bool, detail: str) -> None:
    if staff:
        return None
    if (owner_email or "").strip().lower() != current_user["email"]:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
