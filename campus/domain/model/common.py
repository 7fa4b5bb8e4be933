"""Shared configuration for campus entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base for comments, reports, materials, courses and users.

    Entities are frozen: a change (a report's status transition, say) is a
    new instance from ``model_copy``. Unknown fields are rejected so a
    mapper that drifts from the table schema fails loudly.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")
