"""Use case: Pick a hadith, optionally from one collection.
Follows Single Responsibility Principle - one use case, one responsibility."""
import random
from typing import Optional

from neekihub.application.dto.content_dto import ContentResultDTO
from neekihub.domain.exceptions import ContentNotFoundError
from neekihub.domain.repositories.hadith_repository import HadithRepository
from neekihub.domain.value_objects.language import Language


class GetHadithUseCase:
    """Select one hadith: random, or the first of the (filtered) collection."""

    def __init__(self, repository: HadithRepository, rng: Optional[random.Random] = None):
        self._repository = repository
        self._rng = rng or random.Random()

    async def execute(
        self,
        collection: Optional[str] = None,
        pick_random: bool = False,
        language: Optional[Language] = None,
    ) -> ContentResultDTO:
        """Raises ContentNotFoundError if the collection has no hadiths."""
        if collection and collection.strip():
            hadiths = await self._repository.list_by_collection(collection)
            if not hadiths:
                raise ContentNotFoundError(f"No hadiths found for collection: {collection}")
        else:
            hadiths = await self._repository.list_all()
            if not hadiths:
                raise ContentNotFoundError("No hadiths available")

        hadith = self._rng.choice(hadiths) if pick_random else hadiths[0]
        return ContentResultDTO(data=hadith.to_dict(language), total=len(hadiths))
