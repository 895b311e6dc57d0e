"""Read‑only access to project and publication types."""

from typing import List

from record_store_api.app.repositories.lookups import ProjectTypeRepository, PublicationTypeRepository
from record_store_api.app.schemas.project import ProjectTypeRead
from record_store_api.app.schemas.publication import PublicationTypeRead


class TypeService:
    def __init__(self, project_types: ProjectTypeRepository, publication_types: PublicationTypeRepository) -> None:
        self.project_types = project_types
        self.publication_types = publication_types

    async def list_project_types(self) -> List[ProjectTypeRead]:
        return self.project_types.list()

    async def list_publication_types(self) -> List[PublicationTypeRead]:
        return self.publication_types.list()
