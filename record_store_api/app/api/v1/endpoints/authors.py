"""
Author endpoints for API v1.

Authors are listed alphabetically by full name.  A conflicting
``orcid`` yields HTTP 409 with the offending field names.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from record_store_api.app.api.deps import RecordId, get_author_service
from record_store_api.app.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate
from record_store_api.app.services.author_service import AuthorService

router = APIRouter()


@router.get("", response_model=List[AuthorRead])
async def list_authors(service: AuthorService = Depends(get_author_service)) -> List[AuthorRead]:
    return await service.list_authors()


@router.get("/{author_id}", response_model=AuthorRead)
async def get_author(author_id: RecordId, service: AuthorService = Depends(get_author_service)) -> AuthorRead:
    return await service.get_author(author_id)


@router.post("", response_model=AuthorRead, status_code=status.HTTP_201_CREATED)
async def create_author(author_in: AuthorCreate, service: AuthorService = Depends(get_author_service)) -> AuthorRead:
    return await service.create_author(author_in)


@router.put("/{author_id}", response_model=AuthorRead)
async def update_author(
    author_id: RecordId,
    author_in: AuthorUpdate,
    service: AuthorService = Depends(get_author_service),
) -> AuthorRead:
    return await service.update_author(author_id, author_in)


@router.delete("/{author_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_author(author_id: RecordId, service: AuthorService = Depends(get_author_service)) -> None:
    """Soft‑delete an author.

    Existing publication links keep pointing at the author, but the
    author can no longer be linked to new or updated publications.
    """
    await service.delete_author(author_id)
    return None
