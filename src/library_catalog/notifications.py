"""In-process publish/subscribe hub for GraphQL subscriptions.

Mutation resolvers publish payloads under an event name; subscription
resolvers iterate over :meth:`NotificationHub.subscribe`. Each subscriber
gets its own :class:`asyncio.Queue`, so a slow client only delays itself.

The hub is created when the application starts and closed when it stops.
Nothing is buffered for subscribers that connect after a publish.
"""

import asyncio
import enum
import logging
from collections.abc import AsyncIterator
from typing import Any

logger = logging.getLogger(__name__)


class CatalogEvent(str, enum.Enum):
    """Event names published by the catalog."""

    BOOK_ADDED = "BOOK_ADDED"


_CLOSED = object()


class NotificationHub:
    """Broadcast channel keyed by event name."""

    def __init__(self) -> None:
        self._subscribers: dict[str, list[asyncio.Queue[Any]]] = {}
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def subscriber_count(self, event_name: str) -> int:
        return len(self._subscribers.get(event_name, []))

    def publish(self, event_name: str, payload: Any) -> int:
        """Deliver *payload* to every stream open under *event_name*.

        Returns the number of streams the payload was queued for.
        """
        # Copy: a stream may unregister while we are delivering.
        queues = list(self._subscribers.get(event_name, []))
        for queue in queues:
            queue.put_nowait(payload)
        logger.debug("Published %s to %d subscriber(s)", event_name, len(queues))
        return len(queues)

    async def subscribe(self, event_name: str) -> AsyncIterator[Any]:
        """Yield payloads published under *event_name* until closed.

        Registration happens on the first iteration. Closing the generator
        (``aclose()``, cancellation, or a dropped connection) unregisters
        the stream.
        """
        if self._closed:
            return

        queue: asyncio.Queue[Any] = asyncio.Queue()
        self._subscribers.setdefault(event_name, []).append(queue)
        logger.debug("Subscriber registered for %s", event_name)
        try:
            while True:
                payload = await queue.get()
                if payload is _CLOSED:
                    return
                yield payload
        finally:
            self._unregister(event_name, queue)

    def _unregister(self, event_name: str, queue: asyncio.Queue[Any]) -> None:
        queues = self._subscribers.get(event_name, [])
        if queue in queues:
            queues.remove(queue)
        if not queues:
            self._subscribers.pop(event_name, None)
        logger.debug("Subscriber removed from %s", event_name)

    def close(self) -> None:
        """End every open stream. Called at application shutdown."""
        self._closed = True
        for queues in list(self._subscribers.values()):
            for queue in list(queues):
                queue.put_nowait(_CLOSED)
        logger.info("Notification hub closed")
