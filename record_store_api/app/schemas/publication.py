"""
Pydantic models for publications, publication types and author links.

Authors are attached to a publication through ordered links.  A
request carries them as ``authors: [{authorId, order?}]``; when
``order`` is omitted the link takes its 1‑based position in the array.
On update, the presence of ``authors`` (even as an empty array)
replaces every link, while omitting it leaves the links untouched.
"""

from typing import Any, List, Optional

from pydantic import Field, field_validator

from record_store_api.app.core.validation import (
    optional_string,
    parse_int,
    required_int,
    required_string,
)
from record_store_api.app.schemas.author import AuthorRead
from record_store_api.app.schemas.common import RecordModel

AUTHORS_SHAPE = "authors must be an array of { authorId: int, order?: int }"


def required_year(value: Any, message: str) -> int:
    # year 0 does not exist; it is rejected like a missing year
    number = required_int(value, message)
    if number == 0:
        raise ValueError(message)
    return number


def author_links(value: Any) -> List[dict]:
    """Check the shape of an ``authors`` array and coerce its numbers.

    Each entry needs an integral ``authorId``; ``order``, when given,
    must be a positive integer.  Duplicate author ids pass through.
    """
    if not isinstance(value, list):
        raise ValueError(AUTHORS_SHAPE)
    links = []
    for entry in value:
        if not isinstance(entry, dict):
            raise ValueError(AUTHORS_SHAPE)
        author_id = parse_int(entry.get("authorId", entry.get("author_id")))
        if author_id is None:
            raise ValueError(AUTHORS_SHAPE)
        order = entry.get("order")
        if order is not None:
            order = parse_int(order)
            if order is None or order < 1:
                raise ValueError(AUTHORS_SHAPE)
        links.append({"authorId": author_id, "order": order})
    return links


class PublicationTypeRead(RecordModel):
    id: int
    name: str
    deleted_at: Optional[str] = Field(None, alias="deletedAt")


class AuthorLinkIn(RecordModel):
    author_id: int = Field(..., alias="authorId")
    order: Optional[int] = None


class PublicationCreate(RecordModel):
    year: int = Field(None, examples=[2025], validate_default=True)
    title: str = Field(None, examples=["Soft deletion in relational archives"], validate_default=True)
    description: Optional[str] = None
    type_id: int = Field(None, alias="typeId", examples=[1], validate_default=True)
    authors: List[AuthorLinkIn] = Field(default_factory=list)

    @field_validator("year", mode="before")
    @classmethod
    def validate_year(cls, v):
        return required_year(v, "year is required and must be an integer")

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return required_string(v, "title is required and must be a non-empty string")

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return optional_string(v, "description must be a string (or null / omit)")

    @field_validator("type_id", mode="before")
    @classmethod
    def validate_type_id(cls, v):
        return required_int(v, "typeId is required and must be an integer")

    @field_validator("authors", mode="before")
    @classmethod
    def validate_authors(cls, v):
        return author_links(v)


class PublicationUpdate(RecordModel):
    """Partial update.  ``authors`` is ``None`` only when omitted."""

    year: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    type_id: Optional[int] = Field(None, alias="typeId")
    authors: Optional[List[AuthorLinkIn]] = None

    @field_validator("year", mode="before")
    @classmethod
    def validate_year(cls, v):
        return required_year(v, "year must be an integer")

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return required_string(v, "title must be a non-empty string")

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return optional_string(v, "description must be a string (or null)")

    @field_validator("type_id", mode="before")
    @classmethod
    def validate_type_id(cls, v):
        return required_int(v, "typeId must be an integer")

    @field_validator("authors", mode="before")
    @classmethod
    def validate_authors(cls, v):
        return author_links(v)


class PublicationAuthorRead(RecordModel):
    id: int
    publication_id: int = Field(..., alias="publicationId")
    author_id: int = Field(..., alias="authorId")
    order: int
    deleted_at: Optional[str] = Field(None, alias="deletedAt")
    author: AuthorRead


class PublicationRead(RecordModel):
    id: int
    year: int
    title: str
    description: Optional[str] = None
    type_id: int = Field(..., alias="typeId")
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    deleted_at: Optional[str] = Field(None, alias="deletedAt")
    type: PublicationTypeRead
    authors: List[PublicationAuthorRead] = Field(default_factory=list)
