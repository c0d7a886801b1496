"""Unit tests for the event outbox and its request dependency."""

from uuid import uuid4

import pytest

from brainshelf.application.worker import DiscardingDispatcher, EventOutbox
from brainshelf.domain.event import EntryLinkChanged
from brainshelf.domain.value import EntryId
from brainshelf.util.di.infrastructure import get_event_outbox
from tests.di import RecordingDispatcher


def link_changed(url: str = "https://a.io") -> EntryLinkChanged:
    return EntryLinkChanged(entry_id=EntryId(uuid4()), url=url)


class TestEventOutbox:
    """Tests for EventOutbox."""

    def test_publish_holds_events_until_flush(self):
        """Nothing reaches the dispatcher before flush."""
        # Arrange
        dispatcher = RecordingDispatcher()
        outbox = EventOutbox(dispatcher)
        first, second = link_changed("https://1.io"), link_changed("https://2.io")

        # Act
        outbox.publish(first)
        outbox.publish(second)
        held = list(dispatcher.events)
        outbox.flush()

        # Assert
        assert held == []
        assert dispatcher.events == [first, second]
        assert outbox.pending == []

    def test_discard_drops_events(self):
        """Discarded events are never dispatched."""
        # Arrange
        dispatcher = RecordingDispatcher()
        outbox = EventOutbox(dispatcher)
        outbox.publish(link_changed())

        # Act
        outbox.discard()
        outbox.flush()

        # Assert
        assert dispatcher.events == []

    def test_discarding_dispatcher_accepts_events(self):
        """The no-consumer dispatcher swallows events without failing."""
        DiscardingDispatcher().dispatch(link_changed())


class TestEventOutboxDependency:
    """Tests for the request-scoped outbox dependency."""

    @pytest.mark.asyncio
    async def test_events_flush_when_request_succeeds(self):
        """Events are dispatched once the request finishes cleanly."""
        # Arrange
        dispatcher = RecordingDispatcher()
        dependency = get_event_outbox(dispatcher)
        outbox = await dependency.__anext__()
        event = link_changed()

        # Act
        outbox.publish(event)
        with pytest.raises(StopAsyncIteration):
            await dependency.__anext__()

        # Assert
        assert dispatcher.events == [event]

    @pytest.mark.asyncio
    async def test_events_are_discarded_when_request_fails(self):
        """A failed request dispatches nothing and keeps the error."""
        # Arrange
        dispatcher = RecordingDispatcher()
        dependency = get_event_outbox(dispatcher)
        outbox = await dependency.__anext__()
        outbox.publish(link_changed())

        # Act & Assert
        with pytest.raises(RuntimeError, match="rolled back"):
            await dependency.athrow(RuntimeError("rolled back"))

        assert dispatcher.events == []
