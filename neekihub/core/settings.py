"""Application settings loaded from environment variables."""
import os
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Application settings."""

    # ============================================================================
    # SERVER
    # ============================================================================
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    CORS_ORIGINS: List[str] = [
        origin.strip()
        for origin in os.getenv("CORS_ORIGINS", "*").split(",")
        if origin.strip()
    ]

    # ============================================================================
    # API KEYS
    # ============================================================================
    GEMINI_API_KEY: Optional[str] = os.getenv("GEMINI_API_KEY")
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")
    HF_API_KEY: Optional[str] = os.getenv("HF_API_KEY")
    HF_MODEL: str = os.getenv("HF_MODEL", "microsoft/DialoGPT-medium")
    ADMIN_KEY: Optional[str] = os.getenv("ADMIN_KEY")

    # ============================================================================
    # PERFORMANCE SETTINGS
    # ============================================================================

    # Redis Cache (AI answers). Disabled by default - the in-memory cache is used.
    REDIS_CACHE_ENABLED: bool = os.getenv("REDIS_CACHE_ENABLED", "false").lower() == "true"
    REDIS_CACHE_HOST: str = os.getenv("REDIS_CACHE_HOST", "localhost")
    REDIS_CACHE_PORT: int = int(os.getenv("REDIS_CACHE_PORT", "6379"))
    REDIS_CACHE_DB: int = int(os.getenv("REDIS_CACHE_DB", "2"))
    REDIS_CACHE_PASSWORD: Optional[str] = os.getenv("REDIS_CACHE_PASSWORD") or None

    # Connection Pooling
    HTTP_MAX_CONNECTIONS: int = int(os.getenv("HTTP_MAX_CONNECTIONS", "100"))
    HTTP_MAX_KEEPALIVE: int = int(os.getenv("HTTP_MAX_KEEPALIVE", "50"))
    HTTP_ENABLE_HTTP2: bool = os.getenv("HTTP_ENABLE_HTTP2", "true").lower() == "true"

    @classmethod
    def get_redis_cache_url(cls) -> str:
        """Get Redis cache connection URL."""
        if cls.REDIS_CACHE_PASSWORD:
            return f"redis://:{cls.REDIS_CACHE_PASSWORD}@{cls.REDIS_CACHE_HOST}:{cls.REDIS_CACHE_PORT}/{cls.REDIS_CACHE_DB}"
        return f"redis://{cls.REDIS_CACHE_HOST}:{cls.REDIS_CACHE_PORT}/{cls.REDIS_CACHE_DB}"


# Global settings instance
settings = Settings()
