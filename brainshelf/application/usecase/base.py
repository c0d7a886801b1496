"""Base use case and shared request/response models."""

import math
from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from brainshelf.domain.value import PageRequest


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Request/response model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


Item = TypeVar("Item")


class PagedResponse(CamelModel, Generic[Item]):
    """One page of results."""

    items: list[Item]
    total_count: int
    page_number: int
    page_size: int
    total_pages: int

    @classmethod
    def build(cls, items: list[Item], total: int, page: PageRequest):
        """Build a page response, deriving the page count from the total."""
        return cls(
            items=items,
            total_count=total,
            page_number=page.number,
            page_size=page.size,
            total_pages=math.ceil(total / page.size),
        )
