"""
Application business logic.

Status moves pending -> processing -> completed and is set by staff only.
Applicants can pay for and withdraw their own applications.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone

from bson import ObjectId
from fastapi import HTTPException, status

from core import db
from scholarships import repository as scholarship_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def _object_id(application_id: str) -> ObjectId:
    oid = db.parse_object_id(application_id)
    if oid is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid application id.")
    return oid


async def _get_or_404(oid: ObjectId) -> dict:
    row = await repository.get_application(oid)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    return row


async def create_application(payload: schemas.ApplicationCreate, *, current_user: dict) -> dict:
    scholarship_oid = db.parse_object_id(payload.scholarshipId)
    if scholarship_oid is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid scholarship id.")
    if await scholarship_repository.get_scholarship(scholarship_oid) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Scholarship not found")

    email = current_user["email"]
    existing = await repository.find_user_application(email=email, scholarship_id=payload.scholarshipId)
    if existing is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="You have already applied to this scholarship.",
        )

    document = payload.model_dump()
    document.update(
        {
            "userEmail": email,
            "userName": payload.userName or current_user.get("name") or "Anonymous",
            "status": "pending",
            "paymentStatus": "unpaid",
            "feedback": "",
            "applicationDate": datetime.now(timezone.utc),
        }
    )
    inserted_id = await repository.insert_application(document)
    logger.info("application_created id=%s scholarship_id=%s", inserted_id, payload.scholarshipId)
    return {"message": "Application submitted successfully", "insertedId": inserted_id}


async def update_status(application_id: str, payload: schemas.ApplicationStatusUpdate) -> dict:
    fields: dict = {"status": payload.status}
    if payload.feedback is not None:
        fields["feedback"] = payload.feedback

    matched, modified = await repository.update_application(_object_id(application_id), fields)
    if matched == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Application not found")
    logger.info("application_status id=%s status=%s", application_id, payload.status)
    return {"message": "Application status updated", "modifiedCount": modified}


async def mark_paid(application_id: str, *, current_user: dict) -> dict:
    oid = _object_id(application_id)
    row = await _get_or_404(oid)
    if row.get("userEmail") != current_user["email"]:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Forbidden: You can only pay for your own application",
        )

    _, modified = await repository.update_application(oid, {"paymentStatus": "paid"})
    return {"message": "Payment recorded", "modifiedCount": modified}


async def delete_application(application_id: str, *, current_user: dict, staff: bool) -> dict:
    oid = _object_id(application_id)
    row = await _get_or_404(oid)
    if not staff:
        if row.get("userEmail") != current_user["email"]:
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail="Forbidden: You can only delete your own application",
            )
        if row.get("status") != "pending":
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="Only pending applications can be withdrawn.",
            )

    deleted = await repository.delete_application(oid)
    logger.info("application_deleted id=%s", application_id)
    return {"message": "Application deleted successfully", "deletedCount": deleted}
