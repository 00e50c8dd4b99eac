"""
Application API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from auth import dependencies as auth_dependencies

from . import repository, schemas, service

router = APIRouter(prefix="/api/applications")


@router.get("")
async def list_applications(
    _: dict = Depends(auth_dependencies.require_moderator_or_admin),
) -> list[dict]:
    return await repository.list_applications()


@router.get("/user/{email}")
async def list_user_applications(
    email: str,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> list[dict]:
    email = email.strip().lower()
    auth_dependencies.ensure_owner_or_staff(
        current_user,
        email,
        staff=await auth_dependencies.is_staff(current_user),
        detail="Forbidden: You can only view your own applications",
    )
    return await repository.list_applications_for_user(email)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_application(
    request: schemas.ApplicationCreate,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.create_application(request, current_user=current_user)


@router.patch("/{application_id}")
async def update_application_status(
    application_id: str,
    request: schemas.ApplicationStatusUpdate,
    _: dict = Depends(auth_dependencies.require_moderator_or_admin),
) -> dict:
    return await service.update_status(application_id, request)


@router.patch("/{application_id}/payment")
async def mark_application_paid(
    application_id: str,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.mark_paid(application_id, current_user=current_user)


@router.delete("/{application_id}")
async def delete_application(
    application_id: str,
    current_user: dict = Depends(auth_dependencies.get_current_user),
) -> dict:
    return await service.delete_application(
        application_id,
        current_user=current_user,
        staff=await auth_dependencies.is_staff(current_user),
    )
