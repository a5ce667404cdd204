"""A thread-safe, time-expiring byte cache."""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass
from types import TracebackType


@dataclass(frozen=True)
class _Entry:
    created_at: float
    value: bytes


class Cache:
    """Stores byte values by key and drops entries older than ``interval`` seconds.

    A background daemon thread wakes every ``interval`` seconds and removes
    every entry created more than ``interval`` seconds before that moment.
    """

    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("cache interval must be positive")
        self._interval = interval
        self._entries: dict[str, _Entry] = {}
        self._lock = threading.Lock()
        self._stopped = threading.Event()
        self._reaper = threading.Thread(
            target=self._reap_loop, name="cache-reaper", daemon=True
        )
        self._reaper.start()

    @property
    def interval(self) -> float:
        """Seconds between reaps, and the maximum age of an entry."""
        return self._interval

    def add(self, key: str, value: bytes) -> None:
        """Store ``value`` under ``key``, replacing any earlier entry."""
        entry = _Entry(created_at=time.monotonic(), value=bytes(value))
        with self._lock:
            self._entries[key] = entry

    def get(self, key: str) -> bytes | None:
        """Return the value stored under ``key``, or None if there is none."""
        with self._lock:
            entry = self._entries.get(key)
        return None if entry is None else entry.value

    def reap(self, now: float | None = None, max_age: float | None = None) -> None:
        """Remove entries created before ``now - max_age``.

        ``now`` is a :func:`time.monotonic` timestamp and defaults to the
        current one; ``max_age`` defaults to the cache interval.
        """
        if now is None:
            now = time.monotonic()
        if max_age is None:
            max_age = self._interval
        cutoff = now - max_age
        with self._lock:
            self._entries = {
                key: entry
                for key, entry in self._entries.items()
                if not entry.created_at < cutoff
            }

    def close(self) -> None:
        """Stop the background reaper."""
        self._stopped.set()
        if threading.current_thread() is not self._reaper:
            self._reaper.join()

    def _reap_loop(self) -> None:
        while not self._stopped.wait(self._interval):
            self.reap()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._entries

    def __enter__(self) -> Cache:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()