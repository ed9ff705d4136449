"""DTOs for AI Q&A responses."""
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Dict, Any


@dataclass
class AnswerDTO:
    """Answer returned to the client, whichever provider produced it."""
    answer: str
    sources: List[str]
    confidence: str
    model: str
    language: str
    timestamp: datetime
    note: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON-safe dict (also the cached representation)."""
        result = {
            "answer": self.answer,
            "sources": list(self.sources),
            "confidence": self.confidence,
            "modelMeta": {
                "model": self.model,
                "language": self.language,
                "timestamp": self.timestamp.isoformat(),
            },
        }
        if self.note:
            result["note"] = self.note
        return result


@dataclass
class AskResultDTO:
    """Outcome of an ask: answer data plus cache provenance."""
    data: Dict[str, Any]
    cached: bool = False
    cached_at: Optional[datetime] = None
