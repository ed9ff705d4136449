"""JSON-backed implementation of QuranRepository.
Follows Liskov Substitution Principle - can replace any QuranRepository."""
from typing import Optional, List, Dict
from neekihub.domain.entities.quran import Surah
from neekihub.domain.repositories.quran_repository import QuranRepository
from neekihub.infrastructure.persistence.data_loader import load_dataset, parse_surahs


class JsonQuranRepository(QuranRepository):
    """Serves surahs from the bundled quran.json (or a supplied list)."""

    def __init__(self, surahs: Optional[List[Surah]] = None):
        if surahs is None:
            surahs = parse_surahs(load_dataset("quran"))
        self._surahs: List[Surah] = sorted(surahs, key=lambda s: s.surah_number)
        self._by_number: Dict[int, Surah] = {s.surah_number: s for s in self._surahs}

    async def list_surahs(self) -> List[Surah]:
        """List all surahs in mushaf order."""
        return list(self._surahs)

    async def get_by_number(self, surah_number: int) -> Optional[Surah]:
        """Get surah by its number."""
        return self._by_number.get(surah_number)
