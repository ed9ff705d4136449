"""
Pytest configuration and shared fixtures for backend tests.

This module provides test fixtures for:
- FastAPI test client with dependency overrides
- Fake AI providers and a deterministic answer cache
- Mock external API payloads (Gemini, HuggingFace, Aladhan)
- Admin headers
"""

from typing import Any, Dict, Generator, List

import pytest
from fastapi.testclient import TestClient

from neekihub.application.services.knowledge_base import KnowledgeBase
from neekihub.application.use_cases.ask_question import AskQuestionUseCase
from neekihub.core.settings import settings as core_settings
from neekihub.infrastructure.cache.in_memory_answer_cache import InMemoryAnswerCache
from neekihub.main import app
from tests.fakes import FakeClock

TEST_ADMIN_KEY = "test-admin-key"


# ==============================================================================
# APP FIXTURES
# ==============================================================================

@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """Create a FastAPI test client; overrides are cleared afterwards."""
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def override_dependency():
    """Register a dependency override for the duration of a test."""
    def _override(dependency, value):
        app.dependency_overrides[dependency] = lambda: value
        return value
    return _override


@pytest.fixture
def admin_headers(monkeypatch) -> Dict[str, str]:
    """Configure an admin key and return matching request headers."""
    monkeypatch.setattr(core_settings, "ADMIN_KEY", TEST_ADMIN_KEY)
    return {"X-Admin-Key": TEST_ADMIN_KEY}


@pytest.fixture
def knowledge_base() -> KnowledgeBase:
    """Knowledge base built from the bundled dataset."""
    return KnowledgeBase.from_dataset()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def answer_cache(fake_clock) -> InMemoryAnswerCache:
    return InMemoryAnswerCache(max_entries=3, ttl_seconds=60, clock=fake_clock)


@pytest.fixture
def ai_use_case_factory(answer_cache, knowledge_base):
    """Build an AskQuestionUseCase over fake providers."""
    def _build(providers, use_knowledge_base: bool = True, cache=None):
        return AskQuestionUseCase(
            providers=providers,
            cache=cache or answer_cache,
            knowledge_base=knowledge_base if use_knowledge_base else None,
            max_question_length=500,
        )
    return _build


# ==============================================================================
# MOCK EXTERNAL API FIXTURES
# ==============================================================================

@pytest.fixture
def mock_gemini_api() -> Dict[str, Any]:
    """Mock Gemini generateContent response with a fenced JSON answer."""
    return {
        "candidates": [
            {
                "content": {
                    "parts": [
                        {
                            "text": (
                                "```json\n"
                                '{"answer": "Salah is prayed five times daily.", '
                                '"sources": ["Quran 2:238"], "confidence": "high"}\n'
                                "```"
                            )
                        }
                    ]
                }
            }
        ]
    }


@pytest.fixture
def mock_huggingface_api() -> List[Dict[str, Any]]:
    """Mock HuggingFace inference response."""
    return [{"generated_text": "  Fasting in Ramadan is obligatory.  "}]


@pytest.fixture
def mock_aladhan_api() -> Dict[str, Any]:
    """Mock Aladhan timings response."""
    return {
        "code": 200,
        "status": "OK",
        "data": {
            "timings": {
                "Fajr": "04:12",
                "Sunrise": "05:48",
                "Dhuhr": "12:57",
                "Asr": "16:41",
                "Sunset": "20:05",
                "Maghrib": "20:05",
                "Isha": "21:41",
                "Imsak": "04:02",
                "Midnight": "00:57",
            },
            "date": {
                "readable": "01 Jul 2024",
                "timestamp": "1719792000",
                "gregorian": {"date": "01-07-2024"},
                "hijri": {"date": "24-12-1445"},
            },
            "meta": {
                "latitude": 40.7128,
                "longitude": -74.006,
                "method": {"id": 2, "name": "Islamic Society of North America (ISNA)"},
            },
        },
    }


# ==============================================================================
# MARKERS
# ==============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "unit: Mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: Mark test as an integration test"
    )
