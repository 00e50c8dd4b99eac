"""
Pydantic schemas for review endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class ReviewCreate(BaseModel):
    scholarshipId: str = Field(..., min_length=1, max_length=64)
    universityName: str | None = Field(default=None, max_length=300)
    userName: str | None = Field(default=None, max_length=200)
    userImage: str | None = Field(default=None, max_length=2000)
    ratingPoint: int = Field(..., ge=1, le=5)
    reviewComment: str = Field(default="", max_length=5000)


class ReviewUpdate(BaseModel):
    ratingPoint: int | None = Field(default=None, ge=1, le=5)
    reviewComment: str | None = Field(default=None, max_length=5000)
