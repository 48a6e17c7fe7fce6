"""Base model for all Logus domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Entities are immutable snapshots; create a new instance (or use
    ``model_copy(update=...)``) instead of mutating one.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Unknown fields are a mapping bug, not data
    )
