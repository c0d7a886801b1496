"""Base model for all domain entities."""

from datetime import datetime, timezone
from typing import TypeVar

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


Stamped = TypeVar("Stamped", bound=DomainModel)


def stamp_on_write(record: Stamped, is_new: bool, now: datetime) -> Stamped:
    """Return a copy of `record` with write timestamps applied.

    New records get `created_at` and `updated_at` set to `now`; existing
    records keep `created_at` and only have `updated_at` bumped.

    Args:
        record: Model with created_at/updated_at fields
        is_new: Whether the record is being inserted
        now: Write time

    Returns:
        Stamped copy of the record
    """
    if is_new:
        return record.model_copy(update={"created_at": now, "updated_at": now})
    return record.model_copy(update={"updated_at": now})
