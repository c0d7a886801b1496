"""Background workers and the event outbox."""

from .metadata import MetadataExtractionWorker, MetadataServiceScope
from .outbox import DiscardingDispatcher, EventDispatcher, EventOutbox

__all__ = [
    "DiscardingDispatcher",
    "EventDispatcher",
    "EventOutbox",
    "MetadataExtractionWorker",
    "MetadataServiceScope",
]
