"""Lookup cache for ownership resolution.

Usage:
    cache = LookupCache(lock=threading.RLock())
    key = LookupCache.key("owner_page", area.id)
    if key in cache:
        owner = cache.get(key)
"""

from __future__ import annotations

import hashlib
import logging
import threading
from contextlib import AbstractContextManager, nullcontext
from typing import Any

from contentarea.config import AreaSettings
from contentarea.core.identity import RecordId

_LOGGER = logging.getLogger(__name__)

OWNER_PAGE = "owner_page"
AREA_RELATION_NAME = "area_relation_name"


class LookupCache:
    """Mapping of digest keys to resolved values, scoped to a process or request.

    Entries are never invalidated individually; drop the whole cache with
    ``clear()`` or let it go out of scope. Cached values may be None (a
    cached "not found"), so test membership with ``in`` rather than
    comparing ``get()`` to None.

    Args:
        lock: Context manager guarding every operation (default: no locking).
    """

    def __init__(self, lock: AbstractContextManager[Any] | None = None):
        self._data: dict[str, Any] = {}
        self._lock = lock if lock is not None else nullcontext()

    @staticmethod
    def key(namespace: str, record_id: RecordId) -> str:
        """Stable digest key for a namespace and record id.

        Uses SHA256 so the same record produces the same key across processes.
        """
        return hashlib.sha256(f"{namespace}{record_id.index}".encode()).hexdigest()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    def lookup(self, key: str) -> tuple[bool, Any]:
        """Atomic membership test and read.

        Returns:
            (hit, value) where value is None on a miss.
        """
        with self._lock:
            if key in self._data:
                return True, self._data[key]
            return False, None

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def discard(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            _LOGGER.debug("Clearing lookup cache (%d entries)", len(self._data))
            self._data.clear()


_cache: LookupCache | None = None
_cache_lock = threading.Lock()


def get_lookup_cache() -> LookupCache:
    """Access the process-wide lookup cache, creating it if necessary.

    Guarded by a re-entrant lock unless ``thread_safe_cache`` is turned off.

    Returns:
        The process-wide LookupCache instance.
    """
    global _cache
    if _cache is None:
        with _cache_lock:
            if _cache is None:
                settings = AreaSettings()
                _cache = LookupCache(threading.RLock() if settings.thread_safe_cache else None)
    return _cache
