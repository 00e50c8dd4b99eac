"""
Scholarship persistence.

`ScholarshipStore` is the read contract the query resolver depends on;
`MongoScholarshipStore` implements it over the scholarships collection. Writes
are plain module functions like the other feature repositories.
"""

from __future__ import annotations

from typing import Any, Protocol

from bson import ObjectId

from core import db, filters


class ScholarshipStore(Protocol):
    async def find(
        self,
        query: filters.Filter,
        *,
        sort: filters.Sort,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[dict[str, Any]]: ...

    async def count(self, query: filters.Filter) -> int: ...


class MongoScholarshipStore:
    def __init__(self, collection_name: str = db.SCHOLARSHIPS):
        self.collection_name = collection_name

    async def find(
        self,
        query: filters.Filter,
        *,
        sort: filters.Sort,
        skip: int = 0,
        limit: int | None = None,
    ) -> list[dict[str, Any]]:
        return await db.find_all(
            self.collection_name,
            filters.to_mongo(query),
            sort=filters.sort_to_mongo(sort),
            skip=skip,
            limit=limit or 0,
        )

    async def count(self, query: filters.Filter) -> int:
        return await db.count(self.collection_name, filters.to_mongo(query))


async def get_scholarship(scholarship_id: ObjectId) -> dict | None:
    return await db.find_one(db.SCHOLARSHIPS, {"_id": scholarship_id})


async def insert_scholarship(document: dict[str, Any]) -> str:
    return await db.insert_one(db.SCHOLARSHIPS, document)


async def update_scholarship(scholarship_id: ObjectId, fields: dict[str, Any]) -> tuple[int, int]:
    return await db.update_one(db.SCHOLARSHIPS, {"_id": scholarship_id}, fields)


async def delete_scholarship(scholarship_id: ObjectId) -> int:
    return await db.delete_one(db.SCHOLARSHIPS, {"_id": scholarship_id})
