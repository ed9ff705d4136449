"""Bounded in-memory answer cache with TTL expiry and LRU eviction."""
import logging
import time
from collections import OrderedDict
from typing import Optional, Dict, Any, Callable

logger = logging.getLogger(__name__)


class InMemoryAnswerCache:
    """Process-local cache for AI answers.

    Entries expire ttl_seconds after they were stored. When max_entries is
    reached the least recently used entry is evicted. Only touched from the
    event loop thread, so no locking.
    """

    def __init__(
        self,
        max_entries: int = 100,
        ttl_seconds: float = 3600,
        clock: Callable[[], float] = time.time,
    ):
        if max_entries < 1:
            raise ValueError(f"max_entries must be positive, got {max_entries}")
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        self._max_entries = max_entries
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()

    def _is_expired(self, entry: Dict[str, Any]) -> bool:
        return self._clock() - entry["timestamp"] >= self._ttl_seconds

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Get a live entry and mark it most recently used."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self._is_expired(entry):
            del self._entries[key]
            return None
        self._entries.move_to_end(key)
        return entry

    async def set(self, key: str, data: Dict[str, Any]) -> None:
        """Store data, evicting the least recently used entry when full."""
        self._entries[key] = {"data": data, "timestamp": self._clock()}
        self._entries.move_to_end(key)
        while len(self._entries) > self._max_entries:
            evicted_key, _ = self._entries.popitem(last=False)
            logger.debug(f"Evicted cached answer: {evicted_key[:50]}")

    async def clear(self) -> int:
        """Remove all entries."""
        removed = len(self._entries)
        self._entries.clear()
        return removed

    async def size(self) -> int:
        """Count live entries, dropping expired ones first."""
        for key in [k for k, entry in self._entries.items() if self._is_expired(entry)]:
            del self._entries[key]
        return len(self._entries)
