"""Use case: Verse, hadith and dua of the day.
Follows Single Responsibility Principle - one use case, one responsibility."""
import logging
from datetime import date
from typing import Optional, Dict, Any, Sequence, TypeVar

from neekihub.domain.repositories import QuranRepository, DuaRepository, HadithRepository
from neekihub.domain.value_objects.language import Language

logger = logging.getLogger(__name__)

T = TypeVar("T")


def pick_for_day(items: Sequence[T], day: date) -> Optional[T]:
    """Deterministic daily rotation: index is day-of-year mod len(items)."""
    if not items:
        return None
    return items[day.timetuple().tm_yday % len(items)]


class GetDailyContentUseCase:
    """Same date in, same content out."""

    def __init__(
        self,
        quran_repository: QuranRepository,
        hadith_repository: HadithRepository,
        dua_repository: DuaRepository,
    ):
        self._quran_repository = quran_repository
        self._hadith_repository = hadith_repository
        self._dua_repository = dua_repository

    async def execute(self, day: date, language: Optional[Language] = None) -> Dict[str, Any]:
        surahs = await self._quran_repository.list_surahs()
        pairs = [(surah, verse) for surah in surahs for verse in surah.verses]
        hadiths = await self._hadith_repository.list_all()
        duas = await self._dua_repository.list_all()

        verse_pair = pick_for_day(pairs, day)
        hadith = pick_for_day(hadiths, day)
        dua = pick_for_day(duas, day)

        logger.debug(f"Daily content for {day.isoformat()} drawn from {len(pairs)} verses, "
                     f"{len(hadiths)} hadiths, {len(duas)} duas")
        return {
            "date": day.isoformat(),
            "verse": (
                {"surah": verse_pair[0].reference(), "verse": verse_pair[1].to_dict(language)}
                if verse_pair else None
            ),
            "hadith": hadith.to_dict(language) if hadith else None,
            "dua": dua.to_dict(language) if dua else None,
        }
