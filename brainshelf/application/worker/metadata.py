"""Background metadata extraction for link entries."""

import asyncio
from contextlib import AbstractAsyncContextManager
from typing import Callable, Optional

import logfire

from brainshelf.application.worker.outbox import EventDispatcher
from brainshelf.domain.event import DomainEvent, EntryLinkChanged
from brainshelf.domain.service import MetadataService

# Opens one unit of work and yields a MetadataService bound to it
MetadataServiceScope = Callable[[], AbstractAsyncContextManager[MetadataService]]


class MetadataExtractionWorker(EventDispatcher):
    """Consumes EntryLinkChanged events from a bounded queue.

    A single task processes one job at a time; each job runs in its own
    unit of work. A failed job is logged and the worker moves on. Events
    arriving while the queue is full are dropped.
    """

    def __init__(self, service_scope: MetadataServiceScope, queue_size: int = 100):
        """Initialize worker.

        Args:
            service_scope: Factory for a per-job metadata service scope
            queue_size: Maximum number of waiting jobs
        """
        self.service_scope = service_scope
        self._queue: asyncio.Queue[EntryLinkChanged] = asyncio.Queue(
            maxsize=queue_size
        )
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def pending(self) -> int:
        """Number of queued jobs."""
        return self._queue.qsize()

    def dispatch(self, event: DomainEvent) -> None:
        """Queue an extraction job without waiting."""
        if not isinstance(event, EntryLinkChanged):
            return
        try:
            self._queue.put_nowait(event)
            logfire.debug(
                "Metadata extraction queued",
                entry_id=str(event.entry_id),
                pending=self._queue.qsize(),
            )
        except asyncio.QueueFull:
            logfire.warn(
                "Metadata queue full, dropping extraction",
                entry_id=str(event.entry_id),
                url=event.url,
            )

    async def start(self) -> None:
        """Start the consumer task."""
        if self.running:
            return
        self._task = asyncio.create_task(self._run(), name="metadata-extraction")
        logfire.info("Metadata worker started")

    async def stop(self) -> None:
        """Cancel the consumer task. Queued jobs are abandoned."""
        if self._task is None:
            return
        self._task.cancel()
        try:
            await self._task
        except asyncio.CancelledError:
            pass
        self._task = None
        logfire.info("Metadata worker stopped", abandoned=self._queue.qsize())

    async def drain(self) -> None:
        """Process every queued job in the caller's task."""
        while not self._queue.empty():
            event = self._queue.get_nowait()
            try:
                await self.process(event)
            finally:
                self._queue.task_done()

    async def process(self, event: EntryLinkChanged) -> None:
        """Run one extraction job; errors are logged, never raised."""
        with logfire.span(
            "metadata_worker.process", entry_id=str(event.entry_id), url=event.url
        ):
            try:
                async with self.service_scope() as service:
                    await service.refresh_metadata(event.entry_id, event.url)
            except Exception as e:
                logfire.error(
                    "Metadata extraction failed",
                    entry_id=str(event.entry_id),
                    url=event.url,
                    error=str(e),
                    _exc_info=True,
                )

    async def _run(self) -> None:
        while True:
            event = await self._queue.get()
            try:
                await self.process(event)
            finally:
                self._queue.task_done()
