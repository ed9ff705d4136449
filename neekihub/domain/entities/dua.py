"""Dua domain entity."""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from neekihub.domain.value_objects.language import Language, LocalizedText


@dataclass(frozen=True)
class Dua:
    """A supplication with its source reference."""
    id: int
    category: str
    title: str
    arabic: str
    transliteration: Optional[str] = None
    translations: LocalizedText = field(default_factory=LocalizedText)
    reference: Optional[str] = None
    audio: Optional[str] = None

    def in_category(self, category: str) -> bool:
        """Case-insensitive category match."""
        return self.category.lower() == category.strip().lower()

    def to_dict(self, language: Optional[Language] = None) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "id": self.id,
            "category": self.category,
            "title": self.title,
            "arabic": self.arabic,
            "transliteration": self.transliteration,
            "translations": self.translations.to_dict(),
            "reference": self.reference,
            "audio": self.audio,
        }
        if language is not None:
            result["translation"] = self.translations.resolve(language)
        return result
