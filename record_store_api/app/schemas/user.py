"""
Pydantic models for users and their contact values.

A user owns any number of email addresses and phone numbers.  They are
sent as plain string arrays and returned as child objects carrying
their own ``id``.  Providing an array on update replaces the whole set.
"""

from typing import List, Optional

from pydantic import Field, field_validator

from record_store_api.app.core.validation import required_string, string_list, unique
from record_store_api.app.schemas.common import RecordModel


class EmailRead(RecordModel):
    id: int
    user_id: int = Field(..., alias="userId")
    email: str


class PhoneRead(RecordModel):
    id: int
    user_id: int = Field(..., alias="userId")
    phone: str


class UserCreate(RecordModel):
    """Schema for creating a user.

    Blank or non‑string entries in ``emails`` and ``phones`` are
    silently dropped; the arrays themselves must be arrays.
    """

    name: str = Field(None, examples=["Maria Ivanova"], validate_default=True)
    emails: List[str] = Field(default_factory=list, examples=[["maria@example.com"]])
    phones: List[str] = Field(default_factory=list, examples=[["+359 888 123 456"]])

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return required_string(v, "name is required and must be a string")

    @field_validator("emails", mode="before")
    @classmethod
    def validate_emails(cls, v):
        if v is None:
            return []
        return string_list(v, "emails must be an array of strings")

    @field_validator("phones", mode="before")
    @classmethod
    def validate_phones(cls, v):
        if v is None:
            return []
        return string_list(v, "phones must be an array of strings")


class UserUpdate(RecordModel):
    """Schema for updating a user.

    All fields are optional.  ``emails``/``phones`` replace the stored
    set when present (duplicates collapsed); omitting them leaves the
    set untouched.
    """

    name: Optional[str] = None
    emails: Optional[List[str]] = None
    phones: Optional[List[str]] = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v):
        return required_string(v, "name must be a non-empty string")

    @field_validator("emails", mode="before")
    @classmethod
    def validate_emails(cls, v):
        return unique(string_list(v, "emails must be an array of strings"))

    @field_validator("phones", mode="before")
    @classmethod
    def validate_phones(cls, v):
        return unique(string_list(v, "phones must be an array of strings"))


class UserRead(RecordModel):
    """Schema for reading a user together with live contact values."""

    id: int
    name: str
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    deleted_at: Optional[str] = Field(None, alias="deletedAt")
    emails: List[EmailRead] = Field(default_factory=list)
    phones: List[PhoneRead] = Field(default_factory=list)
