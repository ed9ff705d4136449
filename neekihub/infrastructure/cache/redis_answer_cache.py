"""Redis-based cache for AI answers, shared across worker processes."""
import hashlib
import json
import logging
import time
from typing import Optional, Dict, Any
import redis.asyncio as redis
from neekihub.core.settings import settings

logger = logging.getLogger(__name__)

KEY_PREFIX = "cache:ai_answer"


class RedisAnswerCache:
    """Redis-based answer cache with TTL support.

    Redis expires entries on its own (SETEX). Size is bounded by TTL here;
    LRU eviction is left to the server's maxmemory-policy.
    Errors are logged and treated as cache misses so Q&A keeps working when
    Redis is down.
    """

    def __init__(self, ttl_seconds: int, client: Optional[redis.Redis] = None):
        self._ttl_seconds = ttl_seconds
        self._redis: Optional[redis.Redis] = client
        if self._redis is None:
            self._redis = redis.from_url(
                settings.get_redis_cache_url(),
                encoding="utf-8",
                decode_responses=True
            )
            logger.info(f"Redis answer cache initialized: {settings.REDIS_CACHE_HOST}:{settings.REDIS_CACHE_PORT}/{settings.REDIS_CACHE_DB}")

    def _make_key(self, key: str) -> str:
        """Hash the question key for shorter, uniform Redis keys."""
        key_hash = hashlib.md5(key.encode("utf-8")).hexdigest()
        return f"{KEY_PREFIX}:{key_hash}"

    async def get(self, key: str) -> Optional[Dict[str, Any]]:
        """Get cached entry if exists and not expired."""
        try:
            value = await self._redis.get(self._make_key(key))
            if value:
                return json.loads(value)
            return None
        except Exception as e:
            logger.warning(f"Cache get error: {e}")
            return None

    async def set(self, key: str, data: Dict[str, Any]) -> None:
        """Set cached entry with TTL."""
        try:
            serialized = json.dumps({"data": data, "timestamp": time.time()})
            await self._redis.setex(self._make_key(key), self._ttl_seconds, serialized)
        except Exception as e:
            logger.warning(f"Cache set error: {e}")

    async def clear(self) -> int:
        """Clear all answer keys."""
        removed = 0
        try:
            cursor = 0
            while True:
                cursor, keys = await self._redis.scan(cursor, match=f"{KEY_PREFIX}:*", count=100)
                if keys:
                    removed += await self._redis.delete(*keys)
                if cursor == 0:
                    break
            logger.info(f"Cleared {removed} cached answers")
        except Exception as e:
            logger.warning(f"Cache clear error: {e}")
        return removed

    async def size(self) -> int:
        """Count answer keys."""
        count = 0
        try:
            async for _ in self._redis.scan_iter(match=f"{KEY_PREFIX}:*", count=100):
                count += 1
        except Exception as e:
            logger.warning(f"Cache size error: {e}")
        return count

    async def ping(self) -> bool:
        """Check Redis connectivity."""
        try:
            return bool(await self._redis.ping())
        except Exception as e:
            logger.warning(f"Redis ping failed: {e}")
            return False

    async def close(self):
        """Close Redis connection."""
        if self._redis:
            await self._redis.aclose()
            logger.info("Redis answer cache connection closed")
