"""AI provider interfaces (SOLID-friendly).

Each provider returns an answer already shaped to our domain needs, or None
when the provider is unavailable, so the use case can move on to the next one.
"""
from typing import Protocol, Optional, Dict, Any


class AnswerProvider(Protocol):
    name: str
    model_name: str

    @property
    def is_configured(self) -> bool:
        """Whether credentials for the provider are present."""

    async def answer(self, question: str, language: str) -> Optional[Dict[str, Any]]:
        """Return {"answer", "sources", "confidence", optional "note"} or None."""
