"""
User persistence helpers.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from core import db, filters


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


async def get_user_by_email(email: str) -> dict | None:
    return await db.find_one(db.USERS, {"email": normalize_email(email)})


async def create_user(*, email: str, name: str, photo_url: str, role: str) -> dict:
    now = _utc_now()
    user = {
        "email": normalize_email(email),
        "name": name,
        "photoURL": photo_url,
        "role": role,
        "createdAt": now,
        "updatedAt": now,
    }
    inserted_id = await db.insert_one(db.USERS, user)
    user["_id"] = inserted_id
    return user


async def update_user(email: str, fields: dict[str, Any]) -> tuple[int, int]:
    fields = {**fields, "updatedAt": _utc_now()}
    return await db.update_one(db.USERS, {"email": normalize_email(email)}, fields)


async def delete_user(email: str) -> int:
    return await db.delete_one(db.USERS, {"email": normalize_email(email)})


async def list_users(query: filters.Filter, *, skip: int, limit: int) -> list[dict]:
    return await db.find_all(
        db.USERS,
        filters.to_mongo(query),
        sort=[("createdAt", -1)],
        skip=skip,
        limit=limit,
    )


async def count_users(query: filters.Filter = filters.MatchAll()) -> int:
    return await db.count(db.USERS, filters.to_mongo(query))
