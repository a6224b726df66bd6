"""Key-value stores with expiry used for short-lived secrets."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from typing import Any, Protocol


class KeyValueStore(Protocol):
    """Minimal interface needed by the passcode service.

    Implementations may be process-local or backed by a shared service; the
    caller never depends on which.
    """

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any, *, ttl_seconds: float | None = None) -> None: ...

    def delete(self, key: str) -> None: ...


class InMemoryKeyValueStore:
    """Thread-safe dictionary store that forgets entries after their TTL.

    Entries are lost when the process exits.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._entries: dict[str, tuple[Any, float | None]] = {}

    def get(self, key: str) -> Any | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, evict_at = entry
            if evict_at is not None and self._clock() >= evict_at:
                del self._entries[key]
                return None
            return value

    def set(self, key: str, value: Any, *, ttl_seconds: float | None = None) -> None:
        evict_at = None if ttl_seconds is None else self._clock() + ttl_seconds
        with self._lock:
            self._entries[key] = (value, evict_at)

    def delete(self, key: str) -> None:
        with self._lock:
            self._entries.pop(key, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["InMemoryKeyValueStore", "KeyValueStore"]
