"""Use case: Browse duas by category.
Follows Single Responsibility Principle - one use case, one responsibility."""
import random
from typing import Optional, Dict, Any

from neekihub.application.dto.content_dto import ContentResultDTO
from neekihub.constants import CATEGORY_ALL
from neekihub.domain.exceptions import ContentNotFoundError
from neekihub.domain.repositories.dua_repository import DuaRepository
from neekihub.domain.value_objects.language import Language


class GetDuasUseCase:
    """List, filter and pick duas."""

    def __init__(self, repository: DuaRepository, rng: Optional[random.Random] = None):
        self._repository = repository
        self._rng = rng or random.Random()

    async def list_duas(
        self,
        category: Optional[str] = None,
        pick_random: bool = False,
        language: Optional[Language] = None,
    ) -> ContentResultDTO:
        """Execute use case.

        Args:
            category: Case-insensitive category; None or "all" means every dua
            pick_random: Return a single random dua instead of the list
            language: Adds a resolved translation to each dua

        Raises:
            ContentNotFoundError: if the filter matches nothing
        """
        if category and category.strip() and category.strip().lower() != CATEGORY_ALL:
            duas = await self._repository.list_by_category(category)
            if not duas:
                raise ContentNotFoundError(f"No duas found for category: {category}")
        else:
            duas = await self._repository.list_all()
            if not duas:
                raise ContentNotFoundError("No duas available")

        if pick_random:
            data: Any = self._rng.choice(duas).to_dict(language)
        else:
            data = [dua.to_dict(language) for dua in duas]
        return ContentResultDTO(data=data, total=len(duas))

    async def get_dua(self, dua_id: int, language: Optional[Language] = None) -> Dict[str, Any]:
        """Raises ContentNotFoundError if no dua has this id."""
        dua = await self._repository.get_by_id(dua_id)
        if dua is None:
            raise ContentNotFoundError("Dua not found")
        return dua.to_dict(language)
