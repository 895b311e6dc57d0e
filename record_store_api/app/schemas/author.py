"""
Pydantic models for authors.

Authors are the people linked to publications.  ``email`` and
``orcid`` are optional; an ORCID identifier is unique among live
authors.
"""

from typing import Optional

from pydantic import Field, field_validator

from record_store_api.app.core.validation import optional_string, required_string
from record_store_api.app.schemas.common import RecordModel


class AuthorCreate(RecordModel):
    full_name: str = Field(None, alias="fullName", examples=["Petar Petrov"], validate_default=True)
    email: Optional[str] = Field(None, examples=["p.petrov@example.org"])
    orcid: Optional[str] = Field(None, examples=["0000-0002-1825-0097"])

    @field_validator("full_name", mode="before")
    @classmethod
    def validate_full_name(cls, v):
        return required_string(v, "fullName is required")

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        return optional_string(v, "email must be a string (or null)")

    @field_validator("orcid", mode="before")
    @classmethod
    def validate_orcid(cls, v):
        return optional_string(v, "orcid must be a string (or null)")


class AuthorUpdate(RecordModel):
    """All fields optional; ``null`` clears ``email`` or ``orcid``."""

    full_name: Optional[str] = Field(None, alias="fullName")
    email: Optional[str] = None
    orcid: Optional[str] = None

    @field_validator("full_name", mode="before")
    @classmethod
    def validate_full_name(cls, v):
        return required_string(v, "fullName must be a non-empty string")

    @field_validator("email", mode="before")
    @classmethod
    def validate_email(cls, v):
        return optional_string(v, "email must be a string (or null)")

    @field_validator("orcid", mode="before")
    @classmethod
    def validate_orcid(cls, v):
        return optional_string(v, "orcid must be a string (or null)")


class AuthorRead(RecordModel):
    id: int
    full_name: str = Field(..., alias="fullName")
    email: Optional[str] = None
    orcid: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    deleted_at: Optional[str] = Field(None, alias="deletedAt")
