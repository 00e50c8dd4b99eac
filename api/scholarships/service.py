"""
Scholarship business logic.

`ScholarshipResolver` answers the public list/search endpoint in one of two
shapes:
- LEGACY: a bare list of every match (clients written before pagination)
- PAGINATED: `{items, pagination, filters}`

and reuses the same filter/limit machinery for related scholarships.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from bson import ObjectId
from fastapi import HTTPException, status

from core import db, filters

from . import query as scholarship_query
from . import repository, schemas
from .query import ResponseMode

RELATED_LIMIT = 4

logger = logging.getLogger(__name__)


class ScholarshipResolver:
    def __init__(self, store: repository.ScholarshipStore):
        self.store = store

    async def resolve(self, params: Mapping[str, str | None]) -> list[dict] | dict:
        query = scholarship_query.parse_query(params)
        predicate = scholarship_query.build_filter(query)
        sort = scholarship_query.build_sort(query)

        if query.mode is ResponseMode.LEGACY:
            return await self.store.find(predicate, sort=sort)

        window = query.window
        items = await self.store.find(predicate, sort=sort, skip=window.skip, limit=window.limit)
        total = await self.store.count(predicate)
        return {
            "items": items,
            "pagination": window.metadata(total),
            "filters": scholarship_query.applied_filters(query),
        }

    async def related(self, scholarship: dict[str, Any], *, limit: int = RELATED_LIMIT) -> list[dict]:
        """
        Other scholarships in the same subject category, newest first.
        """
        category = scholarship.get(scholarship_query.CATEGORY_FIELD)
        if not category:
            return []
        predicate = filters.all_of(
            filters.Equals(scholarship_query.CATEGORY_FIELD, category),
            filters.NotEquals("_id", scholarship["_id"]),
        )
        sort = filters.Sort(field=scholarship_query.SORT_FIELDS[scholarship_query.SORT_POST_DATE])
        return await self.store.find(predicate, sort=sort, limit=limit)


def _object_id(scholarship_id: str) -> ObjectId:
    oid = db.parse_object_id(scholarship_id)
    if oid is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid scholarship id.")
    return oid


async def get_scholarship(scholarship_id: str) -> dict:
    row = await repository.get_scholarship(_object_id(scholarship_id))
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scholarship not found")
    return row


async def related_scholarships(resolver: ScholarshipResolver, scholarship_id: str) -> list[dict]:
    scholarship = await get_scholarship(scholarship_id)
    return await resolver.related(scholarship)


async def create_scholarship(payload: schemas.ScholarshipCreate, *, posted_by: str) -> dict:
    document = payload.model_dump()
    if document.get("scholarshipPostDate") is None:
        document["scholarshipPostDate"] = datetime.now(timezone.utc)
    document["postedUserEmail"] = posted_by

    inserted_id = await repository.insert_scholarship(document)
    logger.info("scholarship_created id=%s by=%s", inserted_id, posted_by)
    return {"message": "Scholarship created successfully", "insertedId": inserted_id}


async def update_scholarship(scholarship_id: str, payload: schemas.ScholarshipUpdate) -> dict:
    fields = payload.model_dump(exclude_unset=True)
    if not fields:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update.")

    matched, modified = await repository.update_scholarship(_object_id(scholarship_id), fields)
    if matched == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scholarship not found")
    return {"message": "Scholarship updated successfully", "modifiedCount": modified}


async def delete_scholarship(scholarship_id: str) -> dict:
    deleted = await repository.delete_scholarship(_object_id(scholarship_id))
    if deleted == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scholarship not found")
    logger.info("scholarship_deleted id=%s", scholarship_id)
    return {"message": "Scholarship deleted successfully", "deletedCount": deleted}
