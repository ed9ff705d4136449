"""Keyword-matched canned answers used when no AI provider responds."""
from dataclasses import dataclass
from typing import List, Optional, Dict, Any

from neekihub.constants import CONFIDENCE_LOW
from neekihub.domain.value_objects.language import Language, LocalizedText
from neekihub.infrastructure.persistence.data_loader import load_dataset


@dataclass(frozen=True)
class KnowledgeTopic:
    """One topic with the keywords that select it."""
    topic: str
    keywords: List[str]
    answer: LocalizedText
    references: List[str]

    def matches(self, normalized_question: str) -> bool:
        return any(keyword in normalized_question for keyword in self.keywords)


class KnowledgeBase:
    """First-match keyword lookup over a fixed list of topics."""

    def __init__(self, topics: List[KnowledgeTopic], default: KnowledgeTopic):
        self._topics = topics
        self._default = default

    @classmethod
    def from_dataset(cls, raw: Optional[Dict[str, Any]] = None) -> "KnowledgeBase":
        """Build from knowledge_base.json (or an already loaded dict)."""
        if raw is None:
            raw = load_dataset("knowledge_base")
        topics = [
            KnowledgeTopic(
                topic=item["topic"],
                keywords=[k.lower() for k in item["keywords"]],
                answer=LocalizedText.from_dict(item["answer"]),
                references=list(item.get("references", [])),
            )
            for item in raw["topics"]
        ]
        default = KnowledgeTopic(
            topic="default",
            keywords=[],
            answer=LocalizedText.from_dict(raw["default"]["answer"]),
            references=list(raw["default"].get("references", [])),
        )
        return cls(topics, default)

    def find_topic(self, question: str) -> Optional[KnowledgeTopic]:
        """Return the first topic whose keyword occurs in the question."""
        normalized = question.lower().strip()
        for topic in self._topics:
            if topic.matches(normalized):
                return topic
        return None

    def answer(self, question: str, language: Language) -> Dict[str, Any]:
        """Answer from the matching topic, or the generic default answer."""
        topic = self.find_topic(question) or self._default
        return {
            "answer": topic.answer.resolve(language),
            "sources": list(topic.references),
            "confidence": CONFIDENCE_LOW,
        }
