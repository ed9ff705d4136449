"""Quran repository interface - abstraction for data access."""
from abc import ABC, abstractmethod
from typing import Optional, List
from neekihub.domain.entities.quran import Surah


class QuranRepository(ABC):
    """Repository interface for Surah entity.

    Read-only: the bundled Quran text never changes at runtime.
    """

    @abstractmethod
    async def list_surahs(self) -> List[Surah]:
        """List all surahs in mushaf order."""
        pass

    @abstractmethod
    async def get_by_number(self, surah_number: int) -> Optional[Surah]:
        """Get surah by its number (1-114)."""
        pass
