"""Request-scoped event outbox.

Domain services publish events while the request's transaction is still
open. The outbox holds them until the transaction commits, then hands them
to a dispatcher; on rollback they are dropped.
"""

from abc import ABC, abstractmethod

import logfire

from brainshelf.domain.event import DomainEvent, EventPublisher


class EventDispatcher(ABC):
    """Delivers committed events to their consumers."""

    @abstractmethod
    def dispatch(self, event: DomainEvent) -> None:
        """Deliver an event. Must not block."""
        pass


class EventOutbox(EventPublisher):
    """Buffers events for one unit of work."""

    def __init__(self, dispatcher: EventDispatcher) -> None:
        """Initialize an empty outbox.

        Args:
            dispatcher: Receives the events on flush
        """
        self.dispatcher = dispatcher
        self._pending: list[DomainEvent] = []

    @property
    def pending(self) -> list[DomainEvent]:
        """Events waiting for the commit."""
        return list(self._pending)

    def publish(self, event: DomainEvent) -> None:
        """Hold an event until flush."""
        self._pending.append(event)

    def flush(self) -> None:
        """Dispatch held events in publish order. Call after commit."""
        events, self._pending = self._pending, []
        for event in events:
            self.dispatcher.dispatch(event)
        if events:
            logfire.debug("Outbox flushed", count=len(events))

    def discard(self) -> None:
        """Drop held events. Call after rollback."""
        if self._pending:
            logfire.info("Outbox discarded", count=len(self._pending))
        self._pending = []


class DiscardingDispatcher(EventDispatcher):
    """Dispatcher used when no consumer is configured."""

    def dispatch(self, event: DomainEvent) -> None:
        logfire.debug("Event dropped", event=type(event).__name__)
