# sigtrack/core/counter.py
from __future__ import annotations

import threading
from numbers import Integral

from .exceptions import InvalidCounter


class IdCounter:
    """
    Monotonic identifier source.

    fetch_and_increment() is a single atomic step, so identifiers stay unique
    even when several registries (or threads) draw from the same counter.
    Values are never reset or reused.
    """

    __slots__ = ("_next", "_lock")

    def __init__(self, start: int = 0) -> None:
        if isinstance(start, bool) or not isinstance(start, Integral) or start < 0:
            raise InvalidCounter(f"IdCounter start must be a non-negative integer, got {start!r}.")
        self._next = int(start)
        self._lock = threading.Lock()

    def fetch_and_increment(self) -> int:
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        with self._lock:
            return self._next

    def __repr__(self) -> str:
        return f"IdCounter(next={self.peek()})"
