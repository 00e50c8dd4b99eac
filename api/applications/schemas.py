"""
Pydantic schemas for application endpoints.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

ApplicationStatus = Literal["pending", "processing", "completed"]


class ApplicationCreate(BaseModel):
    scholarshipId: str = Field(..., min_length=1, max_length=64)
    userName: str | None = Field(default=None, max_length=200)
    universityName: str | None = Field(default=None, max_length=300)
    scholarshipCategory: str | None = Field(default=None, max_length=100)
    degree: str | None = Field(default=None, max_length=100)
    applicationFees: float = Field(default=0, ge=0)
    serviceCharge: float = Field(default=0, ge=0)


class ApplicationStatusUpdate(BaseModel):
    status: ApplicationStatus
    feedback: str | None = Field(default=None, max_length=2000)
