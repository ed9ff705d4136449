"""Use case: Read surahs and verses from the Quran repository.
Follows Single Responsibility Principle - one use case, one responsibility."""
import random
from typing import List, Optional, Dict, Any

from neekihub.application.dto.content_dto import ContentResultDTO
from neekihub.domain.entities.quran import Surah, Verse
from neekihub.domain.exceptions import ContentNotFoundError
from neekihub.domain.repositories.quran_repository import QuranRepository
from neekihub.domain.value_objects.language import Language


def _verse_payload(surah: Surah, verse: Verse, language: Optional[Language]) -> Dict[str, Any]:
    return {"surah": surah.reference(), "verse": verse.to_dict(language)}


class GetQuranContentUseCase:
    """Surah listing, surah and verse lookups, and verse-of-the-moment selection."""

    def __init__(self, repository: QuranRepository, rng: Optional[random.Random] = None):
        self._repository = repository
        self._rng = rng or random.Random()

    async def list_surahs(self) -> List[Dict[str, Any]]:
        surahs = await self._repository.list_surahs()
        return [surah.summary() for surah in surahs]

    async def get_surah(self, surah_number: int, language: Optional[Language] = None) -> Dict[str, Any]:
        """Raises ContentNotFoundError if the surah is not bundled."""
        surah = await self._repository.get_by_number(surah_number)
        if surah is None:
            raise ContentNotFoundError("Surah not found")
        return surah.to_dict(language)

    async def get_verse(
        self,
        surah_number: int,
        verse_number: int,
        language: Optional[Language] = None,
    ) -> Dict[str, Any]:
        """Raises ContentNotFoundError for a missing surah or verse."""
        surah = await self._repository.get_by_number(surah_number)
        if surah is None:
            raise ContentNotFoundError("Surah not found")
        verse = surah.get_verse(verse_number)
        if verse is None:
            raise ContentNotFoundError("Verse not found")
        return _verse_payload(surah, verse, language)

    async def all_verses(self) -> List[tuple]:
        """Every (surah, verse) pair in mushaf order."""
        surahs = await self._repository.list_surahs()
        return [(surah, verse) for surah in surahs for verse in surah.verses]

    async def find_verse(
        self,
        surah_number: Optional[int] = None,
        verse_number: Optional[int] = None,
        pick_random: bool = False,
        language: Optional[Language] = None,
    ) -> ContentResultDTO:
        """Pick a verse: random, by surah and ayah, or the first one.

        Raises:
            ContentNotFoundError: if surah and ayah are given but not found,
                or there are no verses at all
        """
        pairs = await self.all_verses()
        if not pairs:
            raise ContentNotFoundError("Verse not found")

        if pick_random:
            surah, verse = self._rng.choice(pairs)
        elif surah_number is not None and verse_number is not None:
            match = next(
                (
                    (s, v) for s, v in pairs
                    if s.surah_number == surah_number and v.verse_number == verse_number
                ),
                None,
            )
            if match is None:
                raise ContentNotFoundError("Verse not found")
            surah, verse = match
        else:
            surah, verse = pairs[0]

        return ContentResultDTO(data=_verse_payload(surah, verse, language), total=len(pairs))
