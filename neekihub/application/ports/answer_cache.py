"""Answer cache interface for the AI Q&A use case.

Implementations can be swapped (in-memory, Redis) without changing the use case.
"""
from typing import Protocol, Optional, Dict, Any


class AnswerCache(Protocol):
    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Return the cached entry {"data": ..., "timestamp": ...} or None if absent/expired."""

    async def set(self, key: str, data: Dict[str, Any]) -> None:
        """Store answer data under key, evicting as the implementation requires."""

    async def clear(self) -> int:
        """Remove every entry and return how many were removed."""

    async def size(self) -> int:
        """Number of live entries."""
