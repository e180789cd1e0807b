from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class CachedValue(Generic[T]):
    """A single memoized field that is either absent or holds a value.

    ``None`` is never a present value, while falsy values such as ``0`` or an
    empty list are. Reads and writes are serialized so two concurrent
    refreshes resolve to whichever wrote last.
    """

    def __init__(self) -> None:
        self._value: T | None = None
        self._present = False
        self._lock = threading.Lock()

    @property
    def is_present(self) -> bool:
        with self._lock:
            return self._present

    def get(self) -> T | None:
        with self._lock:
            return self._value if self._present else None

    def set(self, value: T | None) -> None:
        with self._lock:
            self._value = value
            self._present = value is not None

    def clear(self) -> None:
        with self._lock:
            self._value = None
            self._present = False

    def __repr__(self) -> str:
        if not self._present:
            return "CachedValue(<absent>)"
        return f"CachedValue({self._value!r})"
