# catalog/api/pubsub.py
"""
In-process publish/subscribe for GraphQL subscriptions.

Each subscriber owns an asyncio.Queue bound to its event loop. publish() hands
payloads to every queue registered at call time through call_soon_threadsafe,
so synchronous resolvers running on WSGI worker threads can publish too.
Nothing is buffered for subscribers that connect later.
"""
from __future__ import annotations
import asyncio
import threading
from collections import defaultdict
from typing import Any, AsyncIterator, Dict, List, Tuple

from catalog.api.utils.logger import write_log

BOOK_ADDED = "BOOK_ADDED"


class EventNotifier:
    def __init__(self):
        self._lock = threading.Lock()
        self._subscribers: Dict[str, List[Tuple[asyncio.AbstractEventLoop, asyncio.Queue]]] = defaultdict(list)

    def subscriber_count(self, event_name: str) -> int:
        with self._lock:
            return len(self._subscribers.get(event_name, ()))

    async def subscribe(self, event_name: str) -> AsyncIterator[Any]:
        subscriber = (asyncio.get_running_loop(), asyncio.Queue())
        with self._lock:
            self._subscribers[event_name].append(subscriber)
        try:
            while True:
                yield await subscriber[1].get()
        finally:
            self._remove(event_name, subscriber)

    def publish(self, event_name: str, payload: Any) -> int:
        with self._lock:
            subscribers = list(self._subscribers.get(event_name, ()))

        delivered = 0
        for subscriber in subscribers:
            loop, queue = subscriber
            try:
                loop.call_soon_threadsafe(queue.put_nowait, payload)
                delivered += 1
            except RuntimeError:
                # loop already closed: the client went away
                self._remove(event_name, subscriber)
                write_log({"event": "subscriber_dropped", "event_name": event_name}, stream="pubsub")
        return delivered

    def _remove(self, event_name, subscriber):
        with self._lock:
            subscribers = self._subscribers.get(event_name, [])
            if subscriber in subscribers:
                subscribers.remove(subscriber)
