"""
Pydantic models for e‑library items.

An e‑library item is a catalogue entry: a free‑text ``author`` (not a
link to an Author record), a ``title`` and an optional
``organization``.
"""

from typing import Optional

from pydantic import Field, field_validator

from record_store_api.app.core.validation import optional_string, required_string
from record_store_api.app.schemas.common import RecordModel


class ELibraryItemCreate(RecordModel):
    author: str = Field(None, examples=["Ivan Vazov"], validate_default=True)
    title: str = Field(None, examples=["Under the Yoke"], validate_default=True)
    organization: Optional[str] = Field(None, examples=["National Library"])

    @field_validator("author", mode="before")
    @classmethod
    def validate_author(cls, v):
        return required_string(v, "author is required and must be a non-empty string")

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return required_string(v, "title is required and must be a non-empty string")

    @field_validator("organization", mode="before")
    @classmethod
    def validate_organization(cls, v):
        return optional_string(v, "organization must be a string or null")


class ELibraryItemUpdate(RecordModel):
    author: Optional[str] = None
    title: Optional[str] = None
    organization: Optional[str] = None

    @field_validator("author", mode="before")
    @classmethod
    def validate_author(cls, v):
        return required_string(v, "author must be a non-empty string")

    @field_validator("title", mode="before")
    @classmethod
    def validate_title(cls, v):
        return required_string(v, "title must be a non-empty string")

    @field_validator("organization", mode="before")
    @classmethod
    def validate_organization(cls, v):
        return optional_string(v, "organization must be a string or null")


class ELibraryItemRead(RecordModel):
    id: int
    author: str
    title: str
    organization: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    deleted_at: Optional[str] = Field(None, alias="deletedAt")
