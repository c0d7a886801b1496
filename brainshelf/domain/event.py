"""Domain events and the publisher interface.

Events describe something that already happened to an aggregate. They are
handed to an EventPublisher by domain services and delivered only after the
surrounding transaction commits.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from pydantic import Field

from brainshelf.domain.model.common import DomainModel, utc_now
from brainshelf.domain.value import EntryId


class DomainEvent(DomainModel):
    """Base class for domain events."""

    occurred_at: datetime = Field(default_factory=utc_now)


class EntryLinkChanged(DomainEvent):
    """A link entry was created, or its URL changed, or a refresh was requested."""

    entry_id: EntryId
    url: str


class EventPublisher(ABC):
    """Publishes domain events to out-of-band consumers."""

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Publish an event.

        Args:
            event: Event to publish
        """
        pass
