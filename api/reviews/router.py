"""
Review API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies

from . import repository, schemas, service

router = APIRouter(prefix="/api/reviews")


@router.get("")
async def list_reviews(
    _: dict = Depends(auth_dependencies.require_moderator_or_admin),
) -> list[dict]:
    return await repository.list_reviews()


@router.get("/scholarship/{scholarship_id}")
async def scholarship_reviews(scholarship_id: str) -> dict:
    return await service.scholarship_reviews(scholarship_id)


@router.get("/user/{email}")
async def user_reviews(
    email: str,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    email = email.strip().lower()
    auth_dependencies.ensure_owner_or_staff(
        current_user,
        email,
        staff=await auth_dependencies.is_staff(current_user),
        detail="Forbidden: You can only view your own reviews",
    )
    return await repository.list_reviews_for_user(email)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_review(
    request: schemas.ReviewCreate,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.create_review(request, current_user=current_user)


@router.patch("/{review_id}")
async def update_review(
    review_id: str,
    request: schemas.ReviewUpdate,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.update_review(review_id, request, current_user=current_user)


@router.delete("/{review_id}")
async def delete_review(
    review_id: str,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.delete_review(
        review_id,
        current_user=current_user,
        staff=await auth_dependencies.is_staff(current_user),
    )
