"""
Application persistence helpers.
"""

from __future__ import annotations

from typing import Any

from bson import ObjectId

from core import db

NEWEST_FIRST = [("applicationDate", -1)]


async def list_applications() -> list[dict]:
    return await db.find_all(db.APPLICATIONS, sort=NEWEST_FIRST)


async def list_applications_for_user(email: str) -> list[dict]:
    return await db.find_all(db.APPLICATIONS, {"userEmail": email}, sort=NEWEST_FIRST)


async def get_application(application_id: ObjectId) -> dict | None:
    return await db.find_one(db.APPLICATIONS, {"_id": application_id})


async def find_user_application(*, email: str, scholarship_id: str) -> dict | None:
    return await db.find_one(db.APPLICATIONS, {"userEmail": email, "scholarshipId": scholarship_id})


async def insert_application(document: dict[str, Any]) -> str:
    return await db.insert_one(db.APPLICATIONS, document)


async def update_application(application_id: ObjectId, fields: dict[str, Any]) -> tuple[int, int]:
    return await db.update_one(db.APPLICATIONS, {"_id": application_id}, fields)


async def delete_application(application_id: ObjectId) -> int:
    return await db.delete_one(db.APPLICATIONS, {"_id": application_id})
