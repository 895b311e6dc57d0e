"""E‑library endpoints for API v1."""

from typing import List

from fastapi import APIRouter, Depends, status

from record_store_api.app.api.deps import RecordId, get_elibrary_service
from record_store_api.app.schemas.elibrary import ELibraryItemCreate, ELibraryItemRead, ELibraryItemUpdate
from record_store_api.app.services.elibrary_service import ELibraryService

router = APIRouter()


@router.get("", response_model=List[ELibraryItemRead])
async def list_items(service: ELibraryService = Depends(get_elibrary_service)) -> List[ELibraryItemRead]:
    """Return live items, most recently added first."""
    return await service.list_items()


@router.get("/{item_id}", response_model=ELibraryItemRead)
async def get_item(item_id: RecordId, service: ELibraryService = Depends(get_elibrary_service)) -> ELibraryItemRead:
    return await service.get_item(item_id)


@router.post("", response_model=ELibraryItemRead, status_code=status.HTTP_201_CREATED)
async def create_item(
    item_in: ELibraryItemCreate,
    service: ELibraryService = Depends(get_elibrary_service),
) -> ELibraryItemRead:
    return await service.create_item(item_in)


@router.put("/{item_id}", response_model=ELibraryItemRead)
async def update_item(
    item_id: RecordId,
    item_in: ELibraryItemUpdate,
    service: ELibraryService = Depends(get_elibrary_service),
) -> ELibraryItemRead:
    return await service.update_item(item_id, item_in)


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_item(item_id: RecordId, service: ELibraryService = Depends(get_elibrary_service)) -> None:
    await service.delete_item(item_id)
    return None
