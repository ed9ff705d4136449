"""Use case: Answer an Islamic question through the AI provider chain.
Follows Single Responsibility Principle - one use case, one responsibility."""
import logging
from datetime import datetime, timezone
from typing import List, Optional, Dict, Any, Callable

from neekihub.application.dto.answer_dto import AnswerDTO, AskResultDTO
from neekihub.application.ports.ai_providers import AnswerProvider
from neekihub.application.ports.answer_cache import AnswerCache
from neekihub.application.services.knowledge_base import KnowledgeBase
from neekihub.constants import CONFIDENCE_MEDIUM, MODEL_KNOWLEDGE_BASE
from neekihub.domain.exceptions import QuestionValidationError, UpstreamUnavailableError
from neekihub.domain.value_objects.language import Language

logger = logging.getLogger(__name__)


def make_cache_key(question: str, language: Language) -> str:
    """Cache key: normalized question text plus language code."""
    return f"{question.lower().strip()}-{language.value}"


class AskQuestionUseCase:
    """Validate, consult the answer cache, then try providers in order.

    The chain is the configured providers (Gemini, then HuggingFace) followed
    by the keyword knowledge base when one is supplied.
    """

    def __init__(
        self,
        providers: List[AnswerProvider],
        cache: AnswerCache,
        knowledge_base: Optional[KnowledgeBase] = None,
        max_question_length: int = 500,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._providers = providers
        self._cache = cache
        self._knowledge_base = knowledge_base
        self._max_question_length = max_question_length
        self._clock = clock

    def validate(self, question: Optional[str]) -> str:
        """Return the stripped question or raise QuestionValidationError."""
        if question is None or not question.strip():
            raise QuestionValidationError("Question is required")
        if len(question) > self._max_question_length:
            raise QuestionValidationError(
                f"Question is too long. Maximum {self._max_question_length} characters."
            )
        return question.strip()

    async def _ask_providers(self, question: str, language: Language) -> Optional[AnswerDTO]:
        for provider in self._providers:
            result = await provider.answer(question, language.value)
            if result is None:
                logger.warning(f"AI provider {provider.model_name} failed, trying next")
                continue
            return AnswerDTO(
                answer=result["answer"],
                sources=result.get("sources") or [],
                confidence=result.get("confidence") or CONFIDENCE_MEDIUM,
                note=result.get("note"),
                model=provider.model_name,
                language=language.value,
                timestamp=self._clock(),
            )

        if self._knowledge_base is not None:
            logger.warning("All AI providers failed, answering from knowledge base")
            result = self._knowledge_base.answer(question, language)
            return AnswerDTO(
                answer=result["answer"],
                sources=result["sources"],
                confidence=result["confidence"],
                model=MODEL_KNOWLEDGE_BASE,
                language=language.value,
                timestamp=self._clock(),
            )
        return None

    async def execute(self, question: Optional[str], language: Language) -> AskResultDTO:
        """Execute use case.

        Args:
            question: Raw question text
            language: Requested answer language

        Returns:
            AskResultDTO with the answer data and whether it came from cache

        Raises:
            QuestionValidationError: if the question is blank or too long
            UpstreamUnavailableError: if no provider produced an answer
        """
        question = self.validate(question)
        cache_key = make_cache_key(question, language)

        cached = await self._cache.get(cache_key)
        if cached is not None:
            logger.info(f"Answer cache hit for language={language.value}")
            return AskResultDTO(
                data=cached["data"],
                cached=True,
                cached_at=datetime.fromtimestamp(cached["timestamp"], tz=timezone.utc),
            )

        answer = await self._ask_providers(question, language)
        if answer is None:
            logger.error("All AI providers failed")
            raise UpstreamUnavailableError(
                "All AI providers are currently unavailable. Please try again later."
            )

        data = answer.to_dict()
        await self._cache.set(cache_key, data)
        return AskResultDTO(data=data)

    async def clear_cache(self) -> int:
        """Drop every cached answer; returns the number removed."""
        removed = await self._cache.clear()
        logger.info(f"Answer cache cleared, removed {removed} entries")
        return removed

    async def health(self) -> Dict[str, Any]:
        """Provider availability and cache size."""
        status: Dict[str, Any] = {
            provider.name: provider.is_configured for provider in self._providers
        }
        status["knowledgeBase"] = self._knowledge_base is not None
        status["cacheSize"] = await self._cache.size()
        return status
