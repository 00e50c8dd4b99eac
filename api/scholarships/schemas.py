"""
Pydantic schemas for scholarship endpoints.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class ScholarshipCreate(BaseModel):
    scholarshipName: str = Field(..., min_length=1, max_length=300)
    universityName: str = Field(..., min_length=1, max_length=300)
    universityImage: str | None = None
    universityCountry: str = Field(..., min_length=1, max_length=100)
    universityCity: str | None = None
    universityWorldRank: int | None = Field(default=None, ge=1)
    subjectCategory: str = Field(..., min_length=1, max_length=100)
    scholarshipCategory: str | None = None
    degree: str = Field(..., min_length=1, max_length=100)
    tuitionFees: float | None = Field(default=None, ge=0)
    applicationFees: float = Field(default=0, ge=0)
    serviceCharge: float = Field(default=0, ge=0)
    applicationDeadline: datetime | None = None
    scholarshipPostDate: datetime | None = None


class ScholarshipUpdate(BaseModel):
    scholarshipName: str | None = Field(default=None, min_length=1, max_length=300)
    universityName: str | None = Field(default=None, min_length=1, max_length=300)
    universityImage: str | None = None
    universityCountry: str | None = Field(default=None, min_length=1, max_length=100)
    universityCity: str | None = None
    universityWorldRank: int | None = Field(default=None, ge=1)
    subjectCategory: str | None = Field(default=None, min_length=1, max_length=100)
    scholarshipCategory: str | None = None
    degree: str | None = Field(default=None, min_length=1, max_length=100)
    tuitionFees: float | None = Field(default=None, ge=0)
    applicationFees: float | None = Field(default=None, ge=0)
    serviceCharge: float | None = Field(default=None, ge=0)
    applicationDeadline: datetime | None = None
    scholarshipPostDate: datetime | None = None
