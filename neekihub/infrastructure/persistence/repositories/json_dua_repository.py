"""JSON-backed implementation of DuaRepository.
Follows Liskov Substitution Principle - can replace any DuaRepository."""
from typing import Optional, List, Dict
from neekihub.domain.entities.dua import Dua
from neekihub.domain.repositories.dua_repository import DuaRepository
from neekihub.infrastructure.persistence.data_loader import load_dataset, parse_duas


class JsonDuaRepository(DuaRepository):
    """Serves duas from the bundled duas.json (or a supplied list)."""

    def __init__(self, duas: Optional[List[Dua]] = None):
        if duas is None:
            duas = parse_duas(load_dataset("duas"))
        self._duas: List[Dua] = list(duas)
        self._by_id: Dict[int, Dua] = {d.id: d for d in self._duas}

    async def list_all(self) -> List[Dua]:
        """List all duas."""
        return list(self._duas)

    async def get_by_id(self, dua_id: int) -> Optional[Dua]:
        """Get dua by ID."""
        return self._by_id.get(dua_id)

    async def list_by_category(self, category: str) -> List[Dua]:
        """List duas in a category (case-insensitive)."""
        return [d for d in self._duas if d.in_category(category)]
