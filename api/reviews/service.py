"""
Review business logic.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from bson import ObjectId
from fastapi import HTTPException, status

from core import db

from . import repository, schemas

logger = logging.getLogger(__name__)


def _object_id(review_id: str) -> ObjectId:
    oid = db.parse_object_id(review_id)
    if oid is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid review id.")
    return oid


async def _get_or_404(oid: ObjectId) -> dict:
    row = await repository.get_review(oid)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Review not found")
    return row


async def scholarship_reviews(scholarship_id: str) -> dict:
    reviews = await repository.list_reviews_for_scholarship(scholarship_id)
    ratings = [int(r.get("ratingPoint") or 0) for r in reviews]
    average = round(sum(ratings) / len(ratings), 2) if ratings else 0
    return {"reviews": reviews, "averageRating": average, "count": len(reviews)}


async def create_review(payload: schemas.ReviewCreate, *, current_user: dict) -> dict:
    document = payload.model_dump()
    document.update(
        {
            "userEmail": current_user["email"],
            "userName": payload.userName or current_user.get("name") or "Anonymous",
            "reviewDate": datetime.now(timezone.utc),
        }
    )
    inserted_id = await repository.insert_review(document)
    logger.info("review_created id=%s scholarship_id=%s", inserted_id, payload.scholarshipId)
    return {"message": "Review added successfully", "insertedId": inserted_id}


async def update_review(review_id: str, payload: schemas.ReviewUpdate, *, current_user: dict) -> dict:
    oid = _object_id(review_id)
    row = await _get_or_404(oid)
    if row.get("userEmail") != current_user["email"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: You can only edit your own review",
        )

    fields = payload.model_dump(exclude_none=True)
    if not fields:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No fields to update.")
    fields["reviewDate"] = datetime.now(timezone.utc)

    _, modified = await repository.update_review(oid, fields)
    return {"message": "Review updated successfully", "modifiedCount": modified}


async def delete_review(review_id: str, *, current_user: dict, staff: bool) -> dict:
    oid = _object_id(review_id)
    row = await _get_or_404(oid)
    if not staff and row.get("userEmail") != current_user["email"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: You can only delete your own review",
        )

    deleted = await repository.delete_review(oid)
    logger.info("review_deleted id=%s", review_id)
    return {"message": "Review deleted successfully", "deletedCount": deleted}
