"""
Review persistence helpers.
"""

from __future__ import annotations

from typing import Any

from bson import ObjectId

from core import db

NEWEST_FIRST = [("reviewDate", -1)]


async def list_reviews() -> list[dict]:
    return await db.find_all(db.REVIEWS, sort=NEWEST_FIRST)


async def list_reviews_for_scholarship(scholarship_id: str) -> list[dict]:
    return await db.find_all(db.REVIEWS, {"scholarshipId": scholarship_id}, sort=NEWEST_FIRST)


async def list_reviews_for_user(email: str) -> list[dict]:
    return await db.find_all(db.REVIEWS, {"userEmail": email}, sort=NEWEST_FIRST)


async def get_review(review_id: ObjectId) -> dict | None:
    return await db.find_one(db.REVIEWS, {"_id": review_id})


async def insert_review(document: dict[str, Any]) -> str:
    return await db.insert_one(db.REVIEWS, document)


async def update_review(review_id: ObjectId, fields: dict[str, Any]) -> tuple[int, int]:
    return await db.update_one(db.REVIEWS, {"_id": review_id}, fields)


async def delete_review(review_id: ObjectId) -> int:
    return await db.delete_one(db.REVIEWS, {"_id": review_id})
