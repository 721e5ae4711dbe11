"""Base model configuration for report data structures."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base model: immutable, populated by field name or artifact alias."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)
