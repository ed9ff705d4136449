"""Health check service for monitoring system components."""
import logging
from typing import Dict, Any, List, Optional
from datetime import datetime, timezone
from enum import Enum

from neekihub.application.ports.ai_providers import AnswerProvider
from neekihub.application.ports.answer_cache import AnswerCache
from neekihub.infrastructure.cache.redis_answer_cache import RedisAnswerCache
from neekihub.infrastructure.persistence.data_loader import load_dataset

logger = logging.getLogger(__name__)

DATASETS = ("quran", "duas", "hadiths", "knowledge_base")


class HealthStatus(str, Enum):
    """Health status values."""
    HEALTHY = "healthy"
    UNHEALTHY = "unhealthy"
    DEGRADED = "degraded"


class HealthCheckService:
    """Service for checking health of system components."""

    def __init__(
        self,
        providers: List[AnswerProvider],
        cache: AnswerCache,
        datasets: Optional[tuple] = None,
    ):
        self._providers = providers
        self._cache = cache
        self._datasets = datasets or DATASETS

    def check_datasets(self) -> Dict[str, Any]:
        """Check that every bundled dataset loads.

        Returns:
            Dictionary with status and details
        """
        failed = {}
        for name in self._datasets:
            try:
                load_dataset(name)
            except (OSError, ValueError) as e:
                logger.error(f"Dataset health check failed for {name}: {e}")
                failed[name] = str(e)

        if failed:
            return {
                "status": HealthStatus.UNHEALTHY,
                "message": f"{len(failed)} dataset(s) failed to load",
                "details": {"errors": failed},
            }
        return {
            "status": HealthStatus.HEALTHY,
            "message": "All datasets loaded",
            "details": {"datasets": list(self._datasets)},
        }

    async def check_cache(self) -> Dict[str, Any]:
        """Check the AI answer cache; Redis is pinged, in-memory is always up."""
        if isinstance(self._cache, RedisAnswerCache):
            if not await self._cache.ping():
                # Answers still work, just uncached
                return {
                    "status": HealthStatus.DEGRADED,
                    "message": "Redis answer cache unreachable",
                    "details": {"backend": "redis"},
                }
            backend = "redis"
        else:
            backend = "memory"

        return {
            "status": HealthStatus.HEALTHY,
            "message": "Answer cache available",
            "details": {"backend": backend, "size": await self._cache.size()},
        }

    def check_ai_providers(self) -> Dict[str, Any]:
        """Check which AI providers have credentials configured."""
        configured = {provider.name: provider.is_configured for provider in self._providers}
        if any(configured.values()):
            return {
                "status": HealthStatus.HEALTHY,
                "message": "AI provider configured",
                "details": configured,
            }
        return {
            "status": HealthStatus.DEGRADED,
            "message": "No AI provider configured, answers come from the knowledge base",
            "details": configured,
        }

    async def get_overall_health(self) -> Dict[str, Any]:
        """Get overall system health status.

        Returns:
            Dictionary with overall health and component statuses
        """
        datasets_health = self.check_datasets()
        cache_health = await self.check_cache()
        ai_health = self.check_ai_providers()

        component_statuses = [
            datasets_health["status"],
            cache_health["status"],
            ai_health["status"],
        ]

        if all(status == HealthStatus.HEALTHY for status in component_statuses):
            overall_status = HealthStatus.HEALTHY
        elif any(status == HealthStatus.UNHEALTHY for status in component_statuses):
            overall_status = HealthStatus.UNHEALTHY
        else:
            overall_status = HealthStatus.DEGRADED

        return {
            "status": overall_status,
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "components": {
                "datasets": datasets_health,
                "cache": cache_health,
                "ai": ai_health,
            },
        }
