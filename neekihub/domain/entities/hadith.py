"""Hadith domain entity."""
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from neekihub.domain.value_objects.language import Language, LocalizedText


@dataclass(frozen=True)
class Hadith:
    """A narration from one of the hadith collections."""
    id: int
    collection: str
    number: str
    arabic: str
    text: LocalizedText = field(default_factory=LocalizedText)
    narrator: Optional[str] = None
    reference: Optional[str] = None

    def in_collection(self, collection: str) -> bool:
        """Case-insensitive collection match."""
        return self.collection.lower() == collection.strip().lower()

    def to_dict(self, language: Optional[Language] = None) -> Dict[str, Any]:
        """Convert to dictionary."""
        result = {
            "id": self.id,
            "collection": self.collection,
            "number": self.number,
            "arabic": self.arabic,
            "text": self.text.to_dict(),
            "narrator": self.narrator,
            "reference": self.reference,
        }
        if language is not None:
            result["translation"] = self.text.resolve(language)
        return result
