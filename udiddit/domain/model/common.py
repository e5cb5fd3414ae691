"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Immutable entity base; changes go through ``model_copy``."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
