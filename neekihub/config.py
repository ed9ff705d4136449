"""Application configuration using Pydantic Settings.

This module centralizes all tunable values that may vary between environments.
Values can be overridden via environment variables or .env file.
"""
import os
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # ===== Retry & Timeouts =====
    GEMINI_API_TIMEOUT_SECONDS: int = int(os.getenv("GEMINI_API_TIMEOUT_SECONDS", "30"))
    HF_API_TIMEOUT_SECONDS: int = int(os.getenv("HF_API_TIMEOUT_SECONDS", "30"))
    PRAYER_API_TIMEOUT_SECONDS: int = int(os.getenv("PRAYER_API_TIMEOUT_SECONDS", "10"))
    HTTP_DEFAULT_TIMEOUT_SECONDS: float = float(os.getenv("HTTP_DEFAULT_TIMEOUT_SECONDS", "30"))

    # ===== AI Q&A =====
    AI_QUESTION_MAX_LENGTH: int = int(os.getenv("AI_QUESTION_MAX_LENGTH", "500"))
    AI_CACHE_TTL_SECONDS: int = int(os.getenv("AI_CACHE_TTL_SECONDS", "3600"))  # 1 hour
    AI_CACHE_MAX_ENTRIES: int = int(os.getenv("AI_CACHE_MAX_ENTRIES", "100"))
    AI_KNOWLEDGE_BASE_FALLBACK: bool = os.getenv("AI_KNOWLEDGE_BASE_FALLBACK", "true").lower() == "true"
    GEMINI_TEMPERATURE: float = float(os.getenv("GEMINI_TEMPERATURE", "0.3"))
    GEMINI_TOP_K: int = int(os.getenv("GEMINI_TOP_K", "40"))
    GEMINI_TOP_P: float = float(os.getenv("GEMINI_TOP_P", "0.95"))
    GEMINI_MAX_OUTPUT_TOKENS: int = int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "1024"))
    HF_MAX_LENGTH: int = int(os.getenv("HF_MAX_LENGTH", "500"))
    HF_TEMPERATURE: float = float(os.getenv("HF_TEMPERATURE", "0.7"))
    HF_TOP_P: float = float(os.getenv("HF_TOP_P", "0.9"))

    # ===== Prayer Times =====
    ALADHAN_BASE_URL: str = os.getenv("ALADHAN_BASE_URL", "https://api.aladhan.com/v1")
    PRAYER_CALCULATION_METHOD: int = int(os.getenv("PRAYER_CALCULATION_METHOD", "2"))  # ISNA
    PRAYER_TIMES_CACHE_MAX_AGE: int = int(os.getenv("PRAYER_TIMES_CACHE_MAX_AGE", "3600"))
    PRAYER_TIMES_FALLBACK_ENABLED: bool = os.getenv("PRAYER_TIMES_FALLBACK_ENABLED", "true").lower() == "true"

    # ===== Logging & Debug =====
    RESPONSE_TEXT_PREVIEW_LENGTH: int = int(os.getenv("RESPONSE_TEXT_PREVIEW_LENGTH", "200"))
    ERROR_MESSAGE_TRUNCATION_LENGTH: int = int(os.getenv("ERROR_MESSAGE_TRUNCATION_LENGTH", "400"))

    class Config:
        env_file = ".env"
        case_sensitive = True
        # Allow extra fields from .env that aren't defined here
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure singleton pattern - settings are loaded once.
    """
    return Settings()


# Global settings instance for easy import
settings = get_settings()
