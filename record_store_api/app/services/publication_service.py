"""
Business logic for publications and their authors.

Every reference in a request is checked before anything is written:
the publication type must be live and every distinct ``authorId`` must
belong to a live author.  If any check fails nothing is stored, so a
publication is never created with only some of its authors.

Author order
    Each submitted link keeps its explicit ``order``; links without
    one take their 1‑based position in the submitted array.  Orders
    need not be unique and duplicate author ids are accepted.
"""

import logging
from typing import List, Sequence

from record_store_api.app.core.errors import NotFoundError, ValidationError, store_errors
from record_store_api.app.repositories.authors import AuthorRepository
from record_store_api.app.repositories.publications import AuthorLink, PublicationRepository
from record_store_api.app.repositories.lookups import PublicationTypeRepository
from record_store_api.app.schemas.publication import (
    AuthorLinkIn,
    PublicationCreate,
    PublicationRead,
    PublicationUpdate,
)

logger = logging.getLogger(__name__)

NOT_FOUND = "Publication not found"


def number_authors(links: Sequence[AuthorLinkIn]) -> List[AuthorLink]:
    """Give every link an order, falling back to its position in ``links``."""
    return [
        AuthorLink(author_id=link.author_id, order=link.order if link.order is not None else index)
        for index, link in enumerate(links, start=1)
    ]


class PublicationService:
    def __init__(
        self,
        publications: PublicationRepository,
        publication_types: PublicationTypeRepository,
        authors: AuthorRepository,
    ) -> None:
        self.publications = publications
        self.publication_types = publication_types
        self.authors = authors

    async def list_publications(self) -> List[PublicationRead]:
        return self.publications.list()

    async def list_publications_by_type(self, type_id: int) -> List[PublicationRead]:
        if self.publication_types.get(type_id) is None:
            raise NotFoundError("Publication type not found")
        return self.publications.list(type_id=type_id)

    async def get_publication(self, publication_id: int) -> PublicationRead:
        publication = self.publications.get(publication_id)
        if publication is None:
            raise NotFoundError(NOT_FOUND)
        return publication

    async def create_publication(self, data: PublicationCreate) -> PublicationRead:
        self._check_type(data.type_id)
        links = number_authors(data.authors)
        self._check_authors(links)
        values = {
            "year": data.year,
            "title": data.title,
            "description": data.description,
            "type_id": data.type_id,
        }
        with store_errors(NOT_FOUND):
            publication = self.publications.create(values, links)
        logger.info("Created publication %s with %d author link(s)", publication.id, len(links))
        return publication

    async def update_publication(self, publication_id: int, data: PublicationUpdate) -> PublicationRead:
        """Apply a partial update.

        ``authors`` present in the request (even ``[]``) replaces the
        whole link set in the same transaction as the field changes;
        ``authors`` absent keeps the current links.
        """
        if not self.publications.exists(publication_id):
            raise NotFoundError(NOT_FOUND)

        provided = data.model_fields_set
        if "type_id" in provided:
            self._check_type(data.type_id)

        links = None
        if "authors" in provided:
            links = number_authors(data.authors or [])
            self._check_authors(links)

        changes = data.model_dump(include=provided & {"year", "title", "description", "type_id"})
        with store_errors(NOT_FOUND):
            publication = self.publications.update(publication_id, changes, links)
        if links is not None:
            logger.info("Replaced authors of publication %s with %d link(s)", publication_id, len(links))
        logger.info("Updated publication %s", publication_id)
        return publication

    async def delete_publication(self, publication_id: int) -> None:
        """Soft‑delete a publication and its live author links."""
        if not self.publications.soft_delete(publication_id):
            raise NotFoundError(NOT_FOUND)
        logger.info("Deleted publication %s", publication_id)

    def _check_type(self, type_id: int) -> None:
        if self.publication_types.get(type_id) is None:
            raise ValidationError("Invalid typeId (not found)")

    def _check_authors(self, links: Sequence[AuthorLink]) -> None:
        requested = {link.author_id for link in links}
        if requested and self.authors.live_ids(requested) != requested:
            raise ValidationError("One or more authorId are invalid (not found)")
