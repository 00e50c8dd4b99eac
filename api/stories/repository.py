"""
Success story persistence helpers.
"""

from __future__ import annotations

from typing import Any

from core import db


async def list_stories() -> list[dict]:
    return await db.find_all(db.SUCCESS_STORIES, sort=[("createdAt", -1)])


async def insert_story(document: dict[str, Any]) -> str:
    return await db.insert_one(db.SUCCESS_STORIES, document)
