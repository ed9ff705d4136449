"""Quran domain entities - surahs and their verses."""
from dataclasses import dataclass, field
from typing import List, Optional, Dict, Any

from neekihub.domain.value_objects.language import Language, LocalizedText


@dataclass(frozen=True)
class Verse:
    """A single ayah with its translations and tafseer."""
    verse_number: int
    arabic: str
    transliteration: Optional[str] = None
    translations: LocalizedText = field(default_factory=LocalizedText)
    tafseer: LocalizedText = field(default_factory=LocalizedText)
    audio: Optional[str] = None

    def to_dict(self, language: Optional[Language] = None) -> Dict[str, Any]:
        """Convert to the API shape; with a language, add the resolved translation."""
        result = {
            "verseNumber": self.verse_number,
            "arabic": self.arabic,
            "transliteration": self.transliteration,
            "translations": self.translations.to_dict(),
            "tafseer": self.tafseer.to_dict(),
            "audio": self.audio,
        }
        if language is not None:
            result["translation"] = self.translations.resolve(language)
        return result


@dataclass(frozen=True)
class Surah:
    """A surah with the verses bundled for it."""
    id: int
    surah_number: int
    surah_name: str
    surah_name_arabic: str
    verses: List[Verse] = field(default_factory=list)

    def get_verse(self, verse_number: int) -> Optional[Verse]:
        """Find a verse by its number within this surah."""
        for verse in self.verses:
            if verse.verse_number == verse_number:
                return verse
        return None

    def summary(self) -> Dict[str, Any]:
        """Listing entry without verse bodies."""
        return {
            "id": self.id,
            "surahNumber": self.surah_number,
            "surahName": self.surah_name,
            "surahNameArabic": self.surah_name_arabic,
            "versesCount": len(self.verses),
        }

    def reference(self) -> Dict[str, Any]:
        """Short surah reference attached to single-verse responses."""
        return {
            "number": self.surah_number,
            "name": self.surah_name,
            "nameArabic": self.surah_name_arabic,
        }

    def to_dict(self, language: Optional[Language] = None) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "surahNumber": self.surah_number,
            "surahName": self.surah_name,
            "surahNameArabic": self.surah_name_arabic,
            "verses": [verse.to_dict(language) for verse in self.verses],
        }
