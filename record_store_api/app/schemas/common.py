"""Base model shared by all record schemas."""

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """Accept both the camelCase alias and the Python attribute name."""

    model_config = ConfigDict(populate_by_name=True)
