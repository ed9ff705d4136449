"""Dependency injection for FastAPI routes.
Follows Dependency Inversion Principle - routes depend on abstractions."""
from functools import lru_cache

from neekihub.application.ports.answer_cache import AnswerCache
from neekihub.application.services.knowledge_base import KnowledgeBase
from neekihub.application.use_cases.ask_question import AskQuestionUseCase
from neekihub.application.use_cases.calculate_qibla import CalculateQiblaUseCase
from neekihub.application.use_cases.get_daily_content import GetDailyContentUseCase
from neekihub.application.use_cases.get_duas import GetDuasUseCase
from neekihub.application.use_cases.get_hadith import GetHadithUseCase
from neekihub.application.use_cases.get_prayer_times import GetPrayerTimesUseCase
from neekihub.application.use_cases.get_quran_content import GetQuranContentUseCase
from neekihub.config import settings
from neekihub.core.settings import settings as core_settings
from neekihub.domain.repositories import QuranRepository, DuaRepository, HadithRepository
from neekihub.infrastructure.cache.in_memory_answer_cache import InMemoryAnswerCache
from neekihub.infrastructure.cache.redis_answer_cache import RedisAnswerCache
from neekihub.infrastructure.external_apis.aladhan_client import AladhanClient
from neekihub.infrastructure.external_apis.gemini_client import GeminiClient
from neekihub.infrastructure.external_apis.huggingface_client import HuggingFaceClient
from neekihub.infrastructure.persistence.repositories.json_dua_repository import JsonDuaRepository
from neekihub.infrastructure.persistence.repositories.json_hadith_repository import (
    JsonHadithRepository,
)
from neekihub.services.health_service import HealthCheckService
from neekihub.infrastructure.persistence.repositories.json_quran_repository import (
    JsonQuranRepository,
)


@lru_cache()
def get_quran_repository() -> QuranRepository:
    """Get Quran repository instance."""
    return JsonQuranRepository()


@lru_cache()
def get_dua_repository() -> DuaRepository:
    """Get dua repository instance."""
    return JsonDuaRepository()


@lru_cache()
def get_hadith_repository() -> HadithRepository:
    """Get hadith repository instance."""
    return JsonHadithRepository()


@lru_cache()
def get_answer_cache() -> AnswerCache:
    """Get AI answer cache instance.

    - Default: in-memory TTL + LRU map (single process)
    - If REDIS_CACHE_ENABLED=true: Redis, shared across workers
    """
    if core_settings.REDIS_CACHE_ENABLED:
        return RedisAnswerCache(ttl_seconds=settings.AI_CACHE_TTL_SECONDS)
    return InMemoryAnswerCache(
        max_entries=settings.AI_CACHE_MAX_ENTRIES,
        ttl_seconds=settings.AI_CACHE_TTL_SECONDS,
    )


@lru_cache()
def get_gemini_client() -> GeminiClient:
    return GeminiClient()


@lru_cache()
def get_huggingface_client() -> HuggingFaceClient:
    return HuggingFaceClient()


@lru_cache()
def get_aladhan_client() -> AladhanClient:
    return AladhanClient()


# Use case instances
@lru_cache()
def get_calculate_qibla_use_case() -> CalculateQiblaUseCase:
    """Get Qibla calculation use case."""
    return CalculateQiblaUseCase()


@lru_cache()
def get_ask_question_use_case() -> AskQuestionUseCase:
    """Get AI Q&A use case wired with the provider chain."""
    knowledge_base = KnowledgeBase.from_dataset() if settings.AI_KNOWLEDGE_BASE_FALLBACK else None
    return AskQuestionUseCase(
        providers=[get_gemini_client(), get_huggingface_client()],
        cache=get_answer_cache(),
        knowledge_base=knowledge_base,
        max_question_length=settings.AI_QUESTION_MAX_LENGTH,
    )


@lru_cache()
def get_prayer_times_use_case() -> GetPrayerTimesUseCase:
    """Get prayer times use case."""
    return GetPrayerTimesUseCase(
        source=get_aladhan_client(),
        fallback_enabled=settings.PRAYER_TIMES_FALLBACK_ENABLED,
    )


@lru_cache()
def get_quran_content_use_case() -> GetQuranContentUseCase:
    return GetQuranContentUseCase(get_quran_repository())


@lru_cache()
def get_duas_use_case() -> GetDuasUseCase:
    return GetDuasUseCase(get_dua_repository())


@lru_cache()
def get_hadith_use_case() -> GetHadithUseCase:
    return GetHadithUseCase(get_hadith_repository())


@lru_cache()
def get_daily_content_use_case() -> GetDailyContentUseCase:
    """Get daily content use case."""
    return GetDailyContentUseCase(
        quran_repository=get_quran_repository(),
        hadith_repository=get_hadith_repository(),
        dua_repository=get_dua_repository(),
    )


@lru_cache()
def get_health_service() -> HealthCheckService:
    """Get health check service over the live providers and cache."""
    return HealthCheckService(
        providers=[get_gemini_client(), get_huggingface_client()],
        cache=get_answer_cache(),
    )
