"""Domain value objects for BrainShelf.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import Field, field_validator

from brainshelf.domain.value.common import RootValueObject, ValueObject

MAX_TAG_NAME_LENGTH = 100
MAX_PAGE_SIZE = 100


class EntryType(str, Enum):
    """Kind of entry.

    Values are stable string discriminants stored as-is in the database.
    Adding or renaming a member is a schema change and needs a migration.
    """

    NOTE = "note"
    LINK = "link"
    CODE = "code"
    TASK = "task"

    @property
    def requires_url(self) -> bool:
        """Link entries must point somewhere."""
        return self == EntryType.LINK

    @property
    def requires_content(self) -> bool:
        """Every non-link entry carries its own content."""
        return self != EntryType.LINK


class TagName(RootValueObject[str]):
    """Normalized tag name.

    Names are trimmed and lower-cased on construction, so `TagName(" Go ")`
    and `TagName("go")` compare equal. Must be 1-100 characters after
    normalization.
    """

    @field_validator("root")
    @classmethod
    def normalize_tag_name(cls, v: str) -> str:
        """Normalize and validate tag name."""
        v = v.strip().lower()
        if not v:
            raise ValueError("Tag name must not be blank")
        if len(v) > MAX_TAG_NAME_LENGTH:
            raise ValueError(
                f"Tag name must be at most {MAX_TAG_NAME_LENGTH} characters"
            )
        return v


class ProjectColor(RootValueObject[str]):
    """Hex color used to label a project in the UI (e.g. '#3B82F6' or '#FFF')."""

    @field_validator("root")
    @classmethod
    def validate_color(cls, v: str) -> str:
        """Validate hex color format."""
        if not re.match(r"^#([A-Fa-f0-9]{6}|[A-Fa-f0-9]{3})$", v):
            raise ValueError("Color must be a valid hex color code (e.g. #3B82F6)")
        return v


DEFAULT_PROJECT_COLOR = ProjectColor("#3B82F6")


class PageRequest(ValueObject):
    """1-based page request.

    Use `clamp` for untrusted input: it never raises and never yields a
    page size of zero.
    """

    number: int = Field(default=1, ge=1)
    size: int = Field(default=20, ge=1, le=MAX_PAGE_SIZE)

    @classmethod
    def clamp(cls, number: int, size: int) -> "PageRequest":
        """Build a page request, forcing values into the valid range."""
        return cls(number=max(1, number), size=min(max(1, size), MAX_PAGE_SIZE))

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return (self.number - 1) * self.size
