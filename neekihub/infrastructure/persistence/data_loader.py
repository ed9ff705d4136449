"""Loading of the bundled JSON datasets under neekihub/data."""
import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, List

from neekihub.domain.entities.dua import Dua
from neekihub.domain.entities.hadith import Hadith
from neekihub.domain.entities.quran import Surah, Verse
from neekihub.domain.value_objects.language import LocalizedText

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parents[2] / "data"


@lru_cache(maxsize=None)
def load_dataset(name: str) -> Any:
    """Read and parse data/<name>.json once per process.

    Raises:
        FileNotFoundError: if the dataset is not bundled
        json.JSONDecodeError: if the file is not valid JSON
    """
    path = DATA_DIR / f"{name}.json"
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    logger.info(f"Loaded dataset '{name}' from {path}")
    return data


def parse_surahs(raw: List[dict]) -> List[Surah]:
    """Map raw surah records to entities."""
    return [
        Surah(
            id=item["id"],
            surah_number=item["surahNumber"],
            surah_name=item["surahName"],
            surah_name_arabic=item["surahNameArabic"],
            verses=[
                Verse(
                    verse_number=verse["verseNumber"],
                    arabic=verse["arabic"],
                    transliteration=verse.get("transliteration"),
                    translations=LocalizedText.from_dict(verse.get("translations")),
                    tafseer=LocalizedText.from_dict(verse.get("tafseer")),
                    audio=verse.get("audio"),
                )
                for verse in item.get("verses", [])
            ],
        )
        for item in raw
    ]


def parse_duas(raw: List[dict]) -> List[Dua]:
    """Map raw dua records to entities."""
    return [
        Dua(
            id=item["id"],
            category=item["category"],
            title=item["title"],
            arabic=item["arabic"],
            transliteration=item.get("transliteration"),
            translations=LocalizedText.from_dict(item.get("translations")),
            reference=item.get("reference"),
            audio=item.get("audio"),
        )
        for item in raw
    ]


def parse_hadiths(raw: List[dict]) -> List[Hadith]:
    """Map raw hadith records to entities."""
    return [
        Hadith(
            id=item["id"],
            collection=item["collection"],
            number=str(item["number"]),
            arabic=item["arabic"],
            text=LocalizedText.from_dict(item.get("text")),
            narrator=item.get("narrator"),
            reference=item.get("reference"),
        )
        for item in raw
    ]
