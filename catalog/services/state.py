"""Observable state holders.

`Observable` is the read-only face handed to observers (the UI layer):
read the current `value`, `subscribe()` a callback, or iterate `changes()`
from a coroutine. `MutableObservable` adds `set()` for the owner.

Semantics:
- always holds exactly one value; a new subscriber sees it immediately
- setting a value equal to the current one notifies nobody
- callbacks run synchronously on the caller of `set()` (the event loop)
"""

import asyncio
from collections.abc import AsyncIterator, Callable
import logging
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Observable(Generic[T]):
    def __init__(self, initial: T) -> None:
        self._value = initial
        self._callbacks: list[Callable[[T], None]] = []
        self._queues: list[asyncio.Queue[T]] = []

    @property
    def value(self) -> T:
        return self._value

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register `callback`, call it with the current value, return an unsubscribe function."""
        self._callbacks.append(callback)
        callback(self._value)

        def unsubscribe() -> None:
            if callback in self._callbacks:
                self._callbacks.remove(callback)

        return unsubscribe

    async def changes(self) -> AsyncIterator[T]:
        """Yield the current value, then every later one.

        Values published faster than the consumer reads are queued, not dropped.
        """
        queue: asyncio.Queue[T] = asyncio.Queue()
        queue.put_nowait(self._value)
        self._queues.append(queue)
        try:
            while True:
                yield await queue.get()
        finally:
            self._queues.remove(queue)

    def _notify(self) -> None:
        for queue in list(self._queues):
            queue.put_nowait(self._value)
        for callback in list(self._callbacks):
            try:
                callback(self._value)
            except Exception:
                # One broken observer must not stop the others from updating.
                logger.exception(f"Observer {callback!r} failed")


class MutableObservable(Observable[T]):
    def set(self, value: T) -> None:
        if value == self._value:
            return
        self._value = value
        self._notify()
