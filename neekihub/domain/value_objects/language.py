"""Language codes and localized text - closed set, validated at the boundary."""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Mapping, Optional

from neekihub.domain.exceptions import UnsupportedLanguageError


class Language(str, Enum):
    """Languages the content and AI answers are offered in."""
    ENGLISH = "en"
    URDU = "ur"
    PASHTO = "ps"
    ARABIC = "ar"

    @classmethod
    def from_code(cls, code: Optional[str]) -> "Language":
        """Parse a language code, rejecting anything outside the supported set.

        Raises:
            UnsupportedLanguageError: for unknown codes
        """
        if code is None:
            return cls.ENGLISH
        try:
            return cls(code.strip().lower())
        except (ValueError, AttributeError):
            raise UnsupportedLanguageError(str(code))


DEFAULT_LANGUAGE = Language.ENGLISH


@dataclass(frozen=True)
class LocalizedText:
    """Immutable mapping of language to text.

    A supported language with no entry resolves to the English text.
    """
    values: Mapping[Language, str] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Optional[Mapping[str, str]]) -> "LocalizedText":
        """Build from a JSON object keyed by language code.

        Raises:
            UnsupportedLanguageError: if any key is not a supported code
        """
        if not raw:
            return cls({})
        return cls({Language.from_code(code): text for code, text in raw.items()})

    def resolve(self, language: Language = DEFAULT_LANGUAGE) -> Optional[str]:
        """Text for the language, falling back to English."""
        if language in self.values:
            return self.values[language]
        return self.values.get(DEFAULT_LANGUAGE)

    def to_dict(self) -> Dict[str, str]:
        """Convert to a JSON object keyed by language code."""
        return {language.value: text for language, text in self.values.items()}
