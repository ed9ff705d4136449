"""JSON-backed implementation of HadithRepository.
Follows Liskov Substitution Principle - can replace any HadithRepository."""
from typing import Optional, List
from neekihub.domain.entities.hadith import Hadith
from neekihub.domain.repositories.hadith_repository import HadithRepository
from neekihub.infrastructure.persistence.data_loader import load_dataset, parse_hadiths


class JsonHadithRepository(HadithRepository):
    """Serves hadiths from the bundled hadiths.json (or a supplied list)."""

    def __init__(self, hadiths: Optional[List[Hadith]] = None):
        if hadiths is None:
            hadiths = parse_hadiths(load_dataset("hadiths"))
        self._hadiths: List[Hadith] = list(hadiths)

    async def list_all(self) -> List[Hadith]:
        """List all hadiths."""
        return list(self._hadiths)

    async def list_by_collection(self, collection: str) -> List[Hadith]:
        """List hadiths from one collection (case-insensitive)."""
        return [h for h in self._hadiths if h.in_collection(collection)]
