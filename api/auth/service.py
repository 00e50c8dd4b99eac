"""
Auth business logic.

Identity comes from the verified token; roles come from our `users` collection.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from users import repository as user_repository
from users.schemas import DEFAULT_ROLE

from . import schemas, security

logger = logging.getLogger(__name__)


async def get_user_from_access_token(access_token: str) -> dict:
    try:
        claims = await security.verify_token(access_token)
    except security.AuthSecurityError as exc:
        logger.info("token_rejected reason=%s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Unauthorized: {exc}",
        ) from exc

    return {
        "uid": str(claims.get("user_id") or claims.get("sub") or ""),
        "email": claims["email"],
        "name": claims.get("name"),
    }


async def role_of(email: str) -> str:
    user_row = await user_repository.get_user_by_email(email)
    if user_row is None:
        return DEFAULT_ROLE
    return str(user_row.get("role") or DEFAULT_ROLE)


async def require_role(current_user: dict, allowed: set[str], *, detail: str) -> dict:
    # Unknown users are not in the collection at all, so they get 403 too.
    user_row = await user_repository.get_user_by_email(current_user["email"])
    if user_row is None or user_row.get("role") not in allowed:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
    return {**current_user, "role": user_row["role"]}


async def me(current_user: dict) -> schemas.MeResponse:
    return schemas.MeResponse(
        uid=current_user["uid"],
        email=current_user["email"],
        name=current_user.get("name"),
        role=await role_of(current_user["email"]),
    )
