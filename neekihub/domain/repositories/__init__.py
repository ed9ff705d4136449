"""Repository interfaces."""
from neekihub.domain.repositories.quran_repository import QuranRepository
from neekihub.domain.repositories.dua_repository import DuaRepository
from neekihub.domain.repositories.hadith_repository import HadithRepository

__all__ = [
    "QuranRepository",
    "DuaRepository",
    "HadithRepository",
]
