"""
Business logic for projects.

A project's type can be given by id or by name.  Either way the type
must be live when the project is linked to it.  On update the
``endDate >= startDate`` rule is evaluated on the values the row will
hold afterwards, so sending only a new ``endDate`` is checked against
the stored ``startDate``.
"""

import logging
from datetime import date
from typing import List, Optional

from record_store_api.app.core.errors import NotFoundError, ValidationError, store_errors
from record_store_api.app.repositories.projects import ProjectRepository
from record_store_api.app.repositories.lookups import ProjectTypeRepository
from record_store_api.app.schemas.project import END_BEFORE_START, ProjectCreate, ProjectRead, ProjectUpdate

logger = logging.getLogger(__name__)

NOT_FOUND = "Project not found"


class ProjectService:
    def __init__(self, projects: ProjectRepository, project_types: ProjectTypeRepository) -> None:
        self.projects = projects
        self.project_types = project_types

    async def list_projects(self) -> List[ProjectRead]:
        return self.projects.list()

    async def list_projects_by_type(self, type_id: int) -> List[ProjectRead]:
        if self.project_types.get(type_id) is None:
            raise NotFoundError("Project type not found")
        return self.projects.list(type_id=type_id)

    async def get_project(self, project_id: int) -> ProjectRead:
        project = self.projects.get(project_id)
        if project is None:
            raise NotFoundError(NOT_FOUND)
        return project

    async def create_project(self, data: ProjectCreate) -> ProjectRead:
        type_id = self._resolve_type(data.type_id, data.type_name)
        values = {
            "start_date": data.start_date,
            "end_date": data.end_date,
            "description": data.description,
            "website_url": data.website_url,
            "type_id": type_id,
        }
        with store_errors(NOT_FOUND):
            project = self.projects.create(values)
        logger.info("Created project %s of type %s", project.id, type_id)
        return project

    async def update_project(self, project_id: int, data: ProjectUpdate) -> ProjectRead:
        existing = self.projects.get(project_id)
        if existing is None:
            raise NotFoundError(NOT_FOUND)

        provided = data.model_fields_set
        final_start: date = data.start_date if "start_date" in provided else existing.start_date
        final_end: Optional[date] = data.end_date if "end_date" in provided else existing.end_date
        if final_end is not None and final_end < final_start:
            raise ValidationError(END_BEFORE_START)

        changes = data.model_dump(include=provided & {"start_date", "end_date", "description", "website_url"})
        if "type_id" in provided or "type_name" in provided:
            changes["type_id"] = self._resolve_type(data.type_id, data.type_name)

        with store_errors(NOT_FOUND):
            project = self.projects.update(project_id, changes)
        logger.info("Updated project %s", project_id)
        return project

    async def delete_project(self, project_id: int) -> None:
        if not self.projects.soft_delete(project_id):
            raise NotFoundError(NOT_FOUND)
        logger.info("Deleted project %s", project_id)

    def _resolve_type(self, type_id: Optional[int], type_name: Optional[str]) -> int:
        """Return the id of the live project type named by exactly one reference."""
        if type_id is not None:
            if self.project_types.get(type_id) is None:
                raise ValidationError("Invalid typeId (not found)")
            return type_id
        project_type = self.project_types.find_by_name(type_name or "")
        if project_type is None:
            raise ValidationError("Invalid typeName (not found)")
        return project_type.id
