"""Thread-safe buffer collecting incoming messages until they are drained."""

from __future__ import annotations

import threading
from typing import Generic, MutableSequence, TypeVar

__all__ = ["MessageBuffer"]

T = TypeVar("T")


class MessageBuffer(Generic[T]):
    """Collects messages from a producer thread for a consumer to take in bulk."""

    def __init__(self) -> None:
        self._items: list[T] = []
        self._lock = threading.Lock()

    def push(self, message: T) -> None:
        """Append one incoming message."""
        with self._lock:
            self._items.append(message)

    def drain_into(self, target: MutableSequence[T]) -> int:
        """Move all buffered messages, in arrival order, onto the end of ``target``.

        Returns the number of messages moved.
        """
        with self._lock:
            items, self._items = self._items, []
        target.extend(items)
        return len(items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)