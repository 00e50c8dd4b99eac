"""
User business logic.

Profiles are created on first login and refreshed on later logins; roles are
only ever changed by an admin.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core import filters
from core.pagination import PageWindow

from . import repository, schemas

logger = logging.getLogger(__name__)


def user_filter(*, role: str = "", search: str = "") -> filters.Filter:
    role = (role or "").strip()
    search = (search or "").strip()
    terms: list[filters.Filter] = []
    if role:
        terms.append(filters.Equals("role", role))
    if search:
        terms.append(
            filters.any_of(
                filters.Contains("name", search),
                filters.Contains("email", search),
            )
        )
    return filters.all_of(*terms)


async def check_role(email: str) -> dict:
    user_row = await repository.get_user_by_email(email)
    if user_row is None:
        return {"role": schemas.DEFAULT_ROLE}
    return {"role": user_row.get("role") or schemas.DEFAULT_ROLE}


async def get_user(email: str) -> dict:
    user_row = await repository.get_user_by_email(email)
    if user_row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user_row


async def list_users(window: PageWindow, *, role: str = "", search: str = "") -> dict:
    query = user_filter(role=role, search=search)
    users = await repository.list_users(query, skip=window.skip, limit=window.limit)
    total = await repository.count_users(query)
    pagination = window.metadata(total)
    pagination.pop("hasMore")
    return {"users": users, "pagination": pagination}


async def save_user(payload: schemas.SaveUserRequest) -> tuple[int, dict]:
    """
    Create or refresh a user on login. Returns (status_code, body).
    """
    email = repository.normalize_email(payload.email or "")
    if not email:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Email is required")

    name = (payload.name or "").strip() or "Anonymous"
    photo_url = payload.photoURL or ""

    existing = await repository.get_user_by_email(email)
    if existing is not None:
        matched, modified = await repository.update_user(email, {"name": name, "photoURL": photo_url})
        user = {**existing, "name": name, "photoURL": photo_url}
        return status.HTTP_200_OK, {
            "message": "User updated successfully",
            "user": user,
            "modifiedCount": modified,
        }

    user = await repository.create_user(
        email=email,
        name=name,
        photo_url=photo_url,
        role=schemas.DEFAULT_ROLE,
    )
    logger.info("user_created email=%s", email)
    return status.HTTP_201_CREATED, {
        "message": "User created successfully",
        "user": user,
        "insertedId": user["_id"],
    }


async def update_profile(
    email: str,
    payload: schemas.UpdateProfileRequest,
    *,
    current_user: dict,
    is_admin: bool,
) -> dict:
    if repository.normalize_email(email) != current_user["email"] and not is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: You can only update your own profile",
        )

    fields: dict = {}
    if payload.name:
        fields["name"] = payload.name
    if payload.photoURL is not None:
        fields["photoURL"] = payload.photoURL

    matched, modified = await repository.update_user(email, fields)
    if matched == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return {"message": "User profile updated successfully", "modifiedCount": modified}


async def update_role(email: str, role: str) -> dict:
    role = (role or "").strip()
    if role not in schemas.ROLES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid role. Must be: student, moderator, or admin",
        )

    matched, modified = await repository.update_user(email, {"role": role})
    if matched == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    logger.info("user_role_changed email=%s role=%s", repository.normalize_email(email), role)
    return {"message": f"User role updated to {role}", "modifiedCount": modified}


async def delete_user(email: str, *, current_user: dict) -> dict:
    if repository.normalize_email(email) == current_user["email"]:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot delete your own account",
        )

    deleted = await repository.delete_user(email)
    if deleted == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    logger.info("user_deleted email=%s", repository.normalize_email(email))
    return {"message": "User deleted successfully", "deletedCount": deleted}


async def stats_summary() -> dict:
    by_role = {}
    for role in schemas.ROLES:
        by_role[role] = await repository.count_users(filters.Equals("role", role))
    return {"total": await repository.count_users(), "byRole": by_role}
