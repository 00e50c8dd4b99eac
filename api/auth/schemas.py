"""
Auth API schemas (response models).
"""

from __future__ import annotations

from pydantic import BaseModel


class MeResponse(BaseModel):
    uid: str
    email: str
    name: str | None = None
    role: str
