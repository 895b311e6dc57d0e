"""
Pydantic models for projects and project types.

A project belongs to exactly one project type, referenced either by
``typeId`` or by the type's unique ``typeName`` (never both).  Dates
are calendar dates; ``endDate`` is optional but may not precede
``startDate``.
"""

from datetime import date
from typing import Optional

from pydantic import Field, field_validator, model_validator

from record_store_api.app.core.validation import (
    nullable_date,
    optional_date,
    optional_string,
    required_date,
    required_int,
    required_string,
)
from record_store_api.app.schemas.common import RecordModel

BOTH_TYPE_REFERENCES = "Provide only one of typeId or typeName (not both)"
END_BEFORE_START = "endDate cannot be earlier than startDate"


class ProjectTypeRead(RecordModel):
    id: int
    name: str
    deleted_at: Optional[str] = Field(None, alias="deletedAt")


class ProjectCreate(RecordModel):
    """Schema for creating a project.

    Exactly one of ``type_id``/``type_name`` must be supplied.  The
    date order is checked here because both dates are known.  An empty
    ``endDate`` string is read as "no end date".
    """

    start_date: date = Field(None, alias="startDate", examples=["2025-01-10"], validate_default=True)
    end_date: Optional[date] = Field(None, alias="endDate", examples=["2025-12-31"])
    description: str = Field(None, examples=["Digital archive of regional newspapers"], validate_default=True)
    website_url: Optional[str] = Field(None, alias="websiteUrl", examples=["https://example.org/archive"])
    type_id: Optional[int] = Field(None, alias="typeId", examples=[1])
    type_name: Optional[str] = Field(None, alias="typeName", examples=["International projects"])

    @field_validator("start_date", mode="before")
    @classmethod
    def validate_start_date(cls, v):
        return required_date(v, "startDate is required and must be a valid date")

    @field_validator("end_date", mode="before")
    @classmethod
    def validate_end_date(cls, v):
        return optional_date(v, "endDate must be a valid date (or null)")

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return required_string(v, "description is required and must be a non-empty string")

    @field_validator("website_url", mode="before")
    @classmethod
    def validate_website_url(cls, v):
        return optional_string(v, "websiteUrl must be a string (or null / omit it)")

    @field_validator("type_id", mode="before")
    @classmethod
    def validate_type_id(cls, v):
        return required_int(v, "typeId must be an integer")

    @field_validator("type_name", mode="before")
    @classmethod
    def validate_type_name(cls, v):
        return required_string(v, "typeName must be a non-empty string")

    @model_validator(mode="after")
    def check_type_and_dates(self):
        has_type_id = "type_id" in self.model_fields_set
        has_type_name = "type_name" in self.model_fields_set
        if not has_type_id and not has_type_name:
            raise ValueError("Either typeId or typeName is required")
        if has_type_id and has_type_name:
            raise ValueError(BOTH_TYPE_REFERENCES)
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError(END_BEFORE_START)
        return self


class ProjectUpdate(RecordModel):
    """Schema for a partial project update.

    Only fields present in the request change.  ``endDate: null``
    clears the end date; unlike on create, an empty string is not
    taken as "no date" and is rejected.  The date order is validated by the service
    against the resulting values, since one side may come from the
    stored row.
    """

    start_date: Optional[date] = Field(None, alias="startDate")
    end_date: Optional[date] = Field(None, alias="endDate")
    description: Optional[str] = None
    website_url: Optional[str] = Field(None, alias="websiteUrl")
    type_id: Optional[int] = Field(None, alias="typeId")
    type_name: Optional[str] = Field(None, alias="typeName")

    @field_validator("start_date", mode="before")
    @classmethod
    def validate_start_date(cls, v):
        return required_date(v, "startDate must be a valid date")

    @field_validator("end_date", mode="before")
    @classmethod
    def validate_end_date(cls, v):
        return nullable_date(v, "endDate must be a valid date (or null)")

    @field_validator("description", mode="before")
    @classmethod
    def validate_description(cls, v):
        return required_string(v, "description must be a non-empty string")

    @field_validator("website_url", mode="before")
    @classmethod
    def validate_website_url(cls, v):
        return optional_string(v, "websiteUrl must be a string (or null)")

    @field_validator("type_id", mode="before")
    @classmethod
    def validate_type_id(cls, v):
        return required_int(v, "typeId must be an integer")

    @field_validator("type_name", mode="before")
    @classmethod
    def validate_type_name(cls, v):
        return required_string(v, "typeName must be a non-empty string")

    @model_validator(mode="after")
    def check_type_reference(self):
        if {"type_id", "type_name"} <= self.model_fields_set:
            raise ValueError(BOTH_TYPE_REFERENCES)
        return self


class ProjectRead(RecordModel):
    id: int
    start_date: date = Field(..., alias="startDate")
    end_date: Optional[date] = Field(None, alias="endDate")
    description: str
    website_url: Optional[str] = Field(None, alias="websiteUrl")
    type_id: int = Field(..., alias="typeId")
    created_at: Optional[str] = Field(None, alias="createdAt")
    updated_at: Optional[str] = Field(None, alias="updatedAt")
    deleted_at: Optional[str] = Field(None, alias="deletedAt")
    type: ProjectTypeRead
