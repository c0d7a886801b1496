"""Event test doubles."""

from brainshelf.application.worker import EventDispatcher
from brainshelf.domain.event import DomainEvent, EventPublisher


class RecordingPublisher(EventPublisher):
    """Keeps published events in order."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def publish(self, event: DomainEvent) -> None:
        self.events.append(event)


class RecordingDispatcher(EventDispatcher):
    """Keeps dispatched (committed) events in order."""

    def __init__(self) -> None:
        self.events: list[DomainEvent] = []

    def dispatch(self, event: DomainEvent) -> None:
        self.events.append(event)
