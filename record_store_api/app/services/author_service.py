"""Business logic for authors."""

import logging
from typing import List

from record_store_api.app.core.errors import NotFoundError, store_errors
from record_store_api.app.repositories.authors import AuthorRepository
from record_store_api.app.schemas.author import AuthorCreate, AuthorRead, AuthorUpdate

logger = logging.getLogger(__name__)

NOT_FOUND = "Author not found"


class AuthorService:
    """CRUD for authors, ordered by full name."""

    def __init__(self, authors: AuthorRepository) -> None:
        self.authors = authors

    async def list_authors(self) -> List[AuthorRead]:
        return self.authors.list()

    async def get_author(self, author_id: int) -> AuthorRead:
        author = self.authors.get(author_id)
        if author is None:
            raise NotFoundError(NOT_FOUND)
        return author

    async def create_author(self, data: AuthorCreate) -> AuthorRead:
        with store_errors(NOT_FOUND):
            author = self.authors.create(data.model_dump(include={"full_name", "email", "orcid"}))
        logger.info("Created author %s", author.id)
        return author

    async def update_author(self, author_id: int, data: AuthorUpdate) -> AuthorRead:
        if not self.authors.exists(author_id):
            raise NotFoundError(NOT_FOUND)
        changes = data.model_dump(include=data.model_fields_set)
        with store_errors(NOT_FOUND):
            author = self.authors.update(author_id, changes)
        logger.info("Updated author %s (%s)", author_id, ", ".join(sorted(changes)) or "no changes")
        return author

    async def delete_author(self, author_id: int) -> None:
        if not self.authors.soft_delete(author_id):
            raise NotFoundError(NOT_FOUND)
        logger.info("Deleted author %s", author_id)
