"""
Success story API endpoints.
"""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from auth import dependencies as auth_dependencies

from . import repository

router = APIRouter(prefix="/api/success-stories")


class StoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    university: str | None = Field(default=None, max_length=300)
    scholarshipName: str | None = Field(default=None, max_length=300)
    photoURL: str | None = Field(default=None, max_length=2000)
    story: str = Field(..., min_length=1, max_length=10000)


@router.get("")
async def list_stories() -> list[dict]:
    return await repository.list_stories()


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_story(
    request: StoryCreate,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    document = request.model_dump()
    document["userEmail"] = current_user["email"]
    document["createdAt"] = datetime.now(timezone.utc)
    inserted_id = await repository.insert_story(document)
    return {"message": "Success story created", "insertedId": inserted_id}
