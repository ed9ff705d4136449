"""Hadith repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import List
from neekihub.domain.entities.hadith import Hadith


class HadithRepository(ABC):
    """Repository interface for Hadith entity."""

    @abstractmethod
    async def list_all(self) -> List[Hadith]:
        """List all hadiths."""
        pass

    @abstractmethod
    async def list_by_collection(self, collection: str) -> List[Hadith]:
        """List hadiths from one collection (case-insensitive)."""
        pass
