"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for persisted domain entities.

    Entities are immutable; updates go through ``model_copy(update=...)``.
    """

    model_config = ConfigDict(frozen=True)
