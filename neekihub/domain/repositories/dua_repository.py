"""Dua repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional, List
from neekihub.domain.entities.dua import Dua


class DuaRepository(ABC):
    """Repository interface for Dua entity."""

    @abstractmethod
    async def list_all(self) -> List[Dua]:
        """List all duas."""
        pass

    @abstractmethod
    async def get_by_id(self, dua_id: int) -> Optional[Dua]:
        """Get dua by ID."""
        pass

    @abstractmethod
    async def list_by_category(self, category: str) -> List[Dua]:
        """List duas in a category (case-insensitive)."""
        pass
