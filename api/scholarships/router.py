"""
Scholarship API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status

from auth import dependencies as auth_dependencies

from . import repository, schemas, service

router = APIRouter(prefix="/api/scholarships")


def get_scholarship_store() -> repository.ScholarshipStore:
    return repository.MongoScholarshipStore()


def get_resolver(
    store: repository.ScholarshipStore = Depends(get_scholarship_store),
) -> service.ScholarshipResolver:
    return service.ScholarshipResolver(store)


@router.get("")
async def list_scholarships(
    # Raw, unbounded strings: bad input degrades to defaults, never a 422.
    search: str | None = Query(default=None),
    country: str | None = Query(default=None),
    category: str | None = Query(default=None),
    sortBy: str | None = Query(default=None),
    sortOrder: str | None = Query(default=None),
    page: str | None = Query(default=None),
    limit: str | None = Query(default=None),
    response_format: str | None = Query(default=None, alias="format"),
    resolver: service.ScholarshipResolver = Depends(get_resolver),
) -> list[dict] | dict:
    return await resolver.resolve(
        {
            "search": search,
            "country": country,
            "category": category,
            "sortBy": sortBy,
            "sortOrder": sortOrder,
            "page": page,
            "limit": limit,
            "format": response_format,
        }
    )


@router.get("/{scholarship_id}")
async def get_scholarship(scholarship_id: str) -> dict:
    return await service.get_scholarship(scholarship_id)


@router.get("/{scholarship_id}/related")
async def related_scholarships(
    scholarship_id: str,
    resolver: service.ScholarshipResolver = Depends(get_resolver),
) -> list[dict]:
    return await service.related_scholarships(resolver, scholarship_id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_scholarship(
    request: schemas.ScholarshipCreate,
    current_user: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    return await service.create_scholarship(request, posted_by=current_user["email"])


@router.put("/{scholarship_id}")
async def update_scholarship(
    scholarship_id: str,
    request: schemas.ScholarshipUpdate,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    return await service.update_scholarship(scholarship_id, request)


@router.delete("/{scholarship_id}")
async def delete_scholarship(
    scholarship_id: str,
    _: dict = Depends(auth_dependencies.require_admin),
) -> dict:
    return await service.delete_scholarship(scholarship_id)
