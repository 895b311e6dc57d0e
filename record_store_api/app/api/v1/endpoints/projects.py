"""
Project endpoints for API v1.

Projects reference a project type by ``typeId`` or ``typeName``.
Referencing a missing or deleted type is a 400 on create/update; asking
for the projects of such a type is a 404.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from record_store_api.app.api.deps import RecordId, get_project_service
from record_store_api.app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from record_store_api.app.services.project_service import ProjectService

router = APIRouter()


@router.get("", response_model=List[ProjectRead])
async def list_projects(service: ProjectService = Depends(get_project_service)) -> List[ProjectRead]:
    """Return live projects, newest first, with their type."""
    return await service.list_projects()


@router.get("/by-type/{type_id}", response_model=List[ProjectRead])
async def list_projects_by_type(
    type_id: RecordId,
    service: ProjectService = Depends(get_project_service),
) -> List[ProjectRead]:
    return await service.list_projects_by_type(type_id)


@router.get("/{project_id}", response_model=ProjectRead)
async def get_project(project_id: RecordId, service: ProjectService = Depends(get_project_service)) -> ProjectRead:
    return await service.get_project(project_id)


@router.post("", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
async def create_project(
    project_in: ProjectCreate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    return await service.create_project(project_in)


@router.put("/{project_id}", response_model=ProjectRead)
async def update_project(
    project_id: RecordId,
    project_in: ProjectUpdate,
    service: ProjectService = Depends(get_project_service),
) -> ProjectRead:
    """Partially update a project.

    The end date may not precede the start date once the update is
    applied; ``endDate: null`` removes the end date.
    """
    return await service.update_project(project_id, project_in)


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_project(project_id: RecordId, service: ProjectService = Depends(get_project_service)) -> None:
    await service.delete_project(project_id)
    return None
