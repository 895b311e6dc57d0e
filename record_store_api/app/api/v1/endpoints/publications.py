"""
Publication endpoints for API v1.

Request bodies may carry ``authors: [{authorId, order?}]``.  On
update, sending ``authors`` replaces the whole author list (an empty
array detaches everyone); leaving it out keeps the current list.
Responses list the live authors ordered by ``order``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from record_store_api.app.api.deps import RecordId, get_publication_service
from record_store_api.app.schemas.publication import PublicationCreate, PublicationRead, PublicationUpdate
from record_store_api.app.services.publication_service import PublicationService

router = APIRouter()


@router.get("", response_model=List[PublicationRead])
async def list_publications(
    service: PublicationService = Depends(get_publication_service),
) -> List[PublicationRead]:
    """Return live publications ordered by year (newest first), then id."""
    return await service.list_publications()


@router.get("/by-type/{type_id}", response_model=List[PublicationRead])
async def list_publications_by_type(
    type_id: RecordId,
    service: PublicationService = Depends(get_publication_service),
) -> List[PublicationRead]:
    return await service.list_publications_by_type(type_id)


@router.get("/{publication_id}", response_model=PublicationRead)
async def get_publication(
    publication_id: RecordId,
    service: PublicationService = Depends(get_publication_service),
) -> PublicationRead:
    return await service.get_publication(publication_id)


@router.post("", response_model=PublicationRead, status_code=status.HTTP_201_CREATED)
async def create_publication(
    publication_in: PublicationCreate,
    service: PublicationService = Depends(get_publication_service),
) -> PublicationRead:
    return await service.create_publication(publication_in)


@router.put("/{publication_id}", response_model=PublicationRead)
async def update_publication(
    publication_id: RecordId,
    publication_in: PublicationUpdate,
    service: PublicationService = Depends(get_publication_service),
) -> PublicationRead:
    return await service.update_publication(publication_id, publication_in)


@router.delete("/{publication_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_publication(
    publication_id: RecordId,
    service: PublicationService = Depends(get_publication_service),
) -> None:
    """Soft‑delete a publication together with its author links."""
    await service.delete_publication(publication_id)
    return None
