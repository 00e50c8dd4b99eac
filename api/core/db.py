"""
Async MongoDB access helpers using PyMongo's asyncio client.

This module owns the client. FastAPI opens it on startup and closes it on
shutdown (see `api/main.py`).

Documents leave this module as plain dicts with `_id` rendered as a string so
they can be returned from handlers as-is.
"""

from __future__ import annotations

import os
from typing import Any

from bson import ObjectId
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection

from . import config

DEFAULT_DB_NAME = "ScholarStream"

SCHOLARSHIPS = "scholarships-collection"
APPLICATIONS = "applications"
USERS = "users"
REVIEWS = "reviews"
WISHLISTS = "wishlists"
SUCCESS_STORIES = "success-stories"

_client: AsyncMongoClient | None = None


def mongo_uri() -> str:
    uri = os.environ.get("MONGO_URI", "").strip()
    if not uri:
        raise RuntimeError("MONGO_URI is not set.")
    return uri


def database_name() -> str:
    return config.env_str("MONGO_DB", DEFAULT_DB_NAME)


async def init_client() -> None:
    global _client
    if _client is not None:
        return None
    _client = AsyncMongoClient(
        mongo_uri(),
        serverSelectionTimeoutMS=config.env_int("MONGO_TIMEOUT_MS", 10_000),
    )


async def close_client() -> None:
    global _client
    if _client is None:
        return None
    await _client.close()
    _client = None


def client() -> AsyncMongoClient:
    if _client is None:
        raise RuntimeError("Mongo client is not initialized. Call init_client() on startup.")
    return _client


def collection(name: str) -> AsyncCollection:
    return client()[database_name()][name]


def parse_object_id(raw: str) -> ObjectId | None:
    """
    Return an ObjectId for `raw`, or None if it is not a valid id.
    """
    raw = (raw or "").strip()
    if not ObjectId.is_valid(raw):
        return None
    return ObjectId(raw)


def to_dict(document: dict[str, Any]) -> dict[str, Any]:
    out = dict(document)
    if isinstance(out.get("_id"), ObjectId):
        out["_id"] = str(out["_id"])
    return out


def to_dicts(documents: list[dict[str, Any]]) -> list[dict[str, Any]]:
    return [to_dict(d) for d in documents]


async def find_one(name: str, query: dict[str, Any]) -> dict[str, Any] | None:
    doc = await collection(name).find_one(query)
    return to_dict(doc) if doc is not None else None


async def find_all(
    name: str,
    query: dict[str, Any] | None = None,
    *,
    sort: list[tuple[str, int]] | None = None,
    skip: int = 0,
    limit: int = 0,
) -> list[dict[str, Any]]:
    """
    Run a find and return every matching document as a dict.

    `limit=0` means no limit (Mongo semantics).
    """
    cursor = collection(name).find(query or {})
    if sort:
        cursor = cursor.sort(sort)
    if skip:
        cursor = cursor.skip(skip)
    if limit:
        cursor = cursor.limit(limit)
    return to_dicts(await cursor.to_list(length=None))


async def count(name: str, query: dict[str, Any] | None = None) -> int:
    return await collection(name).count_documents(query or {})


async def insert_one(name: str, document: dict[str, Any]) -> str:
    result = await collection(name).insert_one(document)
    return str(result.inserted_id)


async def update_one(name: str, query: dict[str, Any], fields: dict[str, Any]) -> tuple[int, int]:
    """
    `$set` the given fields on the first match. Returns (matched, modified).
    """
    result = await collection(name).update_one(query, {"$set": fields})
    return result.matched_count, result.modified_count


async def delete_one(name: str, query: dict[str, Any]) -> int:
    result = await collection(name).delete_one(query)
    return result.deleted_count
