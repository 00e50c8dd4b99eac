"""
Wishlist API endpoints. Always scoped to the calling user.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from auth import dependencies as auth_dependencies

from . import repository

router = APIRouter(prefix="/api/wishlists")


class WishlistAddRequest(BaseModel):
    scholarshipId: str = Field(..., min_length=1, max_length=64)


@router.get("")
async def list_wishlist(
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    items = await repository.list_items(current_user["email"])
    return {"items": items, "count": len(items)}


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_to_wishlist(
    request: WishlistAddRequest,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    email = current_user["email"]
    existing = await repository.get_item(email=email, scholarship_id=request.scholarshipId)
    if existing is not None:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Scholarship is already in your wishlist.")

    inserted_id = await repository.add_item(email=email, scholarship_id=request.scholarshipId)
    return {"message": "Added to wishlist", "insertedId": inserted_id}


@router.delete("/{scholarship_id}")
async def remove_from_wishlist(
    scholarship_id: str,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    deleted = await repository.remove_item(email=current_user["email"], scholarship_id=scholarship_id)
    if deleted == 0:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Wishlist item not found")
    return {"message": "Removed from wishlist", "deletedCount": deleted}
