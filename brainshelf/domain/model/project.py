"""Project entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from brainshelf.domain.model.common import DomainModel, utc_now
from brainshelf.domain.value import DEFAULT_PROJECT_COLOR, ProjectColor, ProjectId


class Project(DomainModel):
    """A project groups entries. Deleting a project deletes its entries."""

    id: ProjectId
    name: str = Field(min_length=1, max_length=200)
    description: Optional[str] = Field(default=None, max_length=1000)
    color: ProjectColor = DEFAULT_PROJECT_COLOR
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Name must contain something other than whitespace."""
        if not v.strip():
            raise ValueError("Project name is required")
        return v.strip()
