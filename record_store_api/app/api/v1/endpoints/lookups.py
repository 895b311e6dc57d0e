"""
Lookup endpoints for project and publication types.

Types are seeded by the database migrations and are read‑only through
the API.  Project types are listed by id, publication types by name.
"""

from typing import List

from fastapi import APIRouter, Depends

from record_store_api.app.api.deps import get_type_service
from record_store_api.app.schemas.project import ProjectTypeRead
from record_store_api.app.schemas.publication import PublicationTypeRead
from record_store_api.app.services.type_service import TypeService

project_types_router = APIRouter()
publication_types_router = APIRouter()


@project_types_router.get("", response_model=List[ProjectTypeRead])
async def list_project_types(service: TypeService = Depends(get_type_service)) -> List[ProjectTypeRead]:
    return await service.list_project_types()


@publication_types_router.get("", response_model=List[PublicationTypeRead])
async def list_publication_types(service: TypeService = Depends(get_type_service)) -> List[PublicationTypeRead]:
    return await service.list_publication_types()
