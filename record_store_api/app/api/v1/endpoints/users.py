"""
User endpoints for API v1.

CRUD for users together with their email addresses and phone numbers.
Deletion is soft: the user disappears from every read but the row is
kept.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from record_store_api.app.api.deps import RecordId, get_user_service
from record_store_api.app.schemas.user import UserCreate, UserRead, UserUpdate
from record_store_api.app.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[UserRead])
async def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Return all live users ordered by id, with emails and phones."""
    return await service.list_users()


@router.get("/{user_id}", response_model=UserRead)
async def get_user(user_id: RecordId, service: UserService = Depends(get_user_service)) -> UserRead:
    return await service.get_user(user_id)


@router.post("", response_model=UserRead, status_code=status.HTTP_201_CREATED)
async def create_user(user_in: UserCreate, service: UserService = Depends(get_user_service)) -> UserRead:
    return await service.create_user(user_in)


@router.put("/{user_id}", response_model=UserRead)
async def update_user(
    user_id: RecordId,
    user_in: UserUpdate,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Update a user.

    ``emails`` and ``phones``, when present, replace the stored sets.
    """
    return await service.update_user(user_id, user_in)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: RecordId, service: UserService = Depends(get_user_service)) -> None:
    await service.delete_user(user_id)
    return None
