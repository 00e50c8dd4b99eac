"""
Wishlist persistence helpers. One document per (userEmail, scholarshipId).
"""

from __future__ import annotations

from datetime import datetime, timezone

from core import db


async def list_items(email: str) -> list[dict]:
    return await db.find_all(db.WISHLISTS, {"userEmail": email}, sort=[("addedAt", -1)])


async def get_item(*, email: str, scholarship_id: str) -> dict | None:
    return await db.find_one(db.WISHLISTS, {"userEmail": email, "scholarshipId": scholarship_id})


async def add_item(*, email: str, scholarship_id: str) -> str:
    return await db.insert_one(
        db.WISHLISTS,
        {
            "userEmail": email,
            "scholarshipId": scholarship_id,
            "addedAt": datetime.now(timezone.utc),
        },
    )


async def remove_item(*, email: str, scholarship_id: str) -> int:
    return await db.delete_one(db.WISHLISTS, {"userEmail": email, "scholarshipId": scholarship_id})
