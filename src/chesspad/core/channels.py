"""Fire-and-forget message channels between the board and its host."""

from __future__ import annotations

import logging
import queue
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class IChannel(ABC, Generic[T]):
    """Single-producer / single-consumer outbound channel.

    ``send`` must never block and never raise: a full or closed channel
    drops the item and reports it through the return value.
    """

    @abstractmethod
    def send(self, item: T) -> bool:
        """Offer *item*; ``False`` means it was dropped."""

    @abstractmethod
    def close(self) -> None:
        """Stop accepting items."""

    @property
    @abstractmethod
    def closed(self) -> bool: ...


class QueueChannel(IChannel[T]):
    """Bounded in-process channel backed by ``queue.Queue``.

    Args:
        maxsize: Capacity; ``0`` means unbounded.
    """

    __slots__ = ("_queue", "_closed")

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: queue.Queue[T] = queue.Queue(maxsize)
        self._closed = False

    def send(self, item: T) -> bool:
        if self._closed:
            _LOGGER.debug("Channel closed, dropping %s", item)
            return False
        try:
            self._queue.put_nowait(item)
        except queue.Full:
            _LOGGER.debug("Channel full, dropping %s", item)
            return False
        return True

    def receive(self) -> T | None:
        """Next item without waiting, or ``None`` when empty."""
        try:
            return self._queue.get_nowait()
        except queue.Empty:
            return None

    def drain(self) -> list[T]:
        """All items currently queued, oldest first."""
        items: list[T] = []
        while (item := self.receive()) is not None:
            items.append(item)
        return items

    def close(self) -> None:
        self._closed = True

    @property
    def closed(self) -> bool:
        return self._closed

    def __len__(self) -> int:
        return self._queue.qsize()
