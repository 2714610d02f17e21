"""In-memory device-resource cache guarded by a reader/writer lock.

:class:`ResourceCache` maps a composite key (``profileName:resourceName``,
see :func:`resource_key`) to the last
:class:`~edgeclient.models.DeviceResourceResponse` fetched for it. It is
owned by a :class:`~edgeclient.clients.DeviceProfileClient` and has three
operations only:

- :meth:`~ResourceCache.lookup` -- shared lock; any number of lookups run
  concurrently.
- :meth:`~ResourceCache.store` -- exclusive lock; inserts or overwrites.
- :meth:`~ResourceCache.clear` -- exclusive lock; swaps in a new empty
  mapping so a racing lookup sees either the old or the new mapping.

Entries never expire. A device resource is assumed immutable once named,
so callers that change a profile must call :meth:`~ResourceCache.clear`.
"""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Generic, Iterator, Optional, TypeVar

V = TypeVar("V")

KEY_SEPARATOR = ":"


def resource_key(profile_name: str, resource_name: str) -> str:
    """Return the cache key for a device resource of a profile."""
    return f"{profile_name}{KEY_SEPARATOR}{resource_name}"


class ReadWriteLock:
    """Many readers or one writer.

    A waiting writer blocks new readers, so a steady stream of lookups
    cannot starve :meth:`write`.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    @contextmanager
    def read(self) -> Iterator[None]:
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1
        try:
            yield
        finally:
            with self._cond:
                self._readers -= 1
                if self._readers == 0:
                    self._cond.notify_all()

    @contextmanager
    def write(self) -> Iterator[None]:
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True
        try:
            yield
        finally:
            with self._cond:
                self._writer = False
                self._cond.notify_all()


class ResourceCache(Generic[V]):
    """Thread-safe ``str -> V`` mapping with lookup, store and clear.

    Example::

        cache: ResourceCache[DeviceResourceResponse] = ResourceCache()
        value, found = cache.lookup(resource_key("Thermostat", "Temperature"))
        if not found:
            value = fetch()
            cache.store(resource_key("Thermostat", "Temperature"), value)
    """

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._entries: dict[str, V] = {}

    def lookup(self, key: str) -> tuple[Optional[V], bool]:
        """Return ``(value, True)`` for a cached *key*, else ``(None, False)``."""
        with self._lock.read():
            if key in self._entries:
                return self._entries[key], True
            return None, False

    def store(self, key: str, value: V) -> None:
        with self._lock.write():
            self._entries[key] = value

    def clear(self) -> None:
        """Drop every entry at once."""
        with self._lock.write():
            self._entries = {}

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._entries)
