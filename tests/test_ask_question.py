"""Tests for the AI Q&A use case: validation, caching and provider chain."""
import httpx
import pytest

from neekihub.application.use_cases.ask_question import make_cache_key
from neekihub.constants import MODEL_KNOWLEDGE_BASE
from neekihub.domain.exceptions import QuestionValidationError, UpstreamUnavailableError
from neekihub.domain.value_objects.language import Language
from neekihub.infrastructure.external_apis.gemini_client import GeminiClient
from tests.fakes import FakeProvider

GEMINI_RESULT = {"answer": "Five daily prayers.", "sources": ["Quran 2:238"], "confidence": "high"}
HF_RESULT = {
    "answer": "Prayer is important.",
    "sources": [],
    "confidence": "low",
    "note": "Fallback model used - sources may be limited",
}


@pytest.mark.unit
class TestValidation:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("question", [None, "", "   "])
    async def test_blank_question_rejected(self, ai_use_case_factory, question):
        use_case = ai_use_case_factory([FakeProvider("gemini", GEMINI_RESULT)])

        with pytest.raises(QuestionValidationError, match="Question is required"):
            await use_case.execute(question, Language.ENGLISH)

    @pytest.mark.asyncio
    async def test_too_long_question_rejected(self, ai_use_case_factory):
        use_case = ai_use_case_factory([FakeProvider("gemini", GEMINI_RESULT)])

        with pytest.raises(QuestionValidationError, match="Maximum 500 characters"):
            await use_case.execute("a" * 501, Language.ENGLISH)

    def test_cache_key_normalizes_question(self):
        assert make_cache_key("  What is Zakat? ", Language.URDU) == "what is zakat?-ur"


@pytest.mark.unit
class TestProviderChain:

    @pytest.mark.asyncio
    async def test_first_provider_answers(self, ai_use_case_factory):
        gemini = FakeProvider("gemini", GEMINI_RESULT)
        huggingface = FakeProvider("huggingface-fallback", HF_RESULT)
        use_case = ai_use_case_factory([gemini, huggingface])

        result = await use_case.execute("How many prayers?", Language.ENGLISH)

        assert result.cached is False
        assert result.data["answer"] == "Five daily prayers."
        assert result.data["confidence"] == "high"
        assert result.data["modelMeta"]["model"] == "gemini"
        assert result.data["modelMeta"]["language"] == "en"
        assert huggingface.calls == []

    @pytest.mark.asyncio
    async def test_falls_back_to_second_provider(self, ai_use_case_factory):
        gemini = FakeProvider("gemini", None)
        huggingface = FakeProvider("huggingface-fallback", HF_RESULT)
        use_case = ai_use_case_factory([gemini, huggingface])

        result = await use_case.execute("How many prayers?", Language.ENGLISH)

        assert len(gemini.calls) == 1
        assert result.data["modelMeta"]["model"] == "huggingface-fallback"
        assert result.data["note"] == HF_RESULT["note"]

    @pytest.mark.asyncio
    async def test_falls_back_to_knowledge_base(self, ai_use_case_factory):
        use_case = ai_use_case_factory([FakeProvider("gemini", None), FakeProvider("hf", None)])

        result = await use_case.execute("Tell me about Ramadan fasting", Language.ENGLISH)

        assert result.data["modelMeta"]["model"] == MODEL_KNOWLEDGE_BASE
        assert result.data["confidence"] == "low"
        assert "Ramadan" in result.data["answer"]
        assert "Quran 2:183-185" in result.data["sources"]

    @pytest.mark.asyncio
    async def test_knowledge_base_default_answer(self, ai_use_case_factory):
        use_case = ai_use_case_factory([FakeProvider("gemini", None)])

        result = await use_case.execute("Who are you?", Language.ARABIC)

        assert result.data["sources"] == ["General Islamic Knowledge"]
        assert result.data["answer"].startswith("شكراً")

    @pytest.mark.asyncio
    async def test_all_providers_fail(self, ai_use_case_factory):
        use_case = ai_use_case_factory([FakeProvider("gemini", None)], use_knowledge_base=False)

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await use_case.execute("How many prayers?", Language.ENGLISH)
        assert exc_info.value.status_code == 503


@pytest.mark.unit
class TestCaching:

    @pytest.mark.asyncio
    async def test_second_ask_is_served_from_cache(self, ai_use_case_factory):
        gemini = FakeProvider("gemini", GEMINI_RESULT)
        use_case = ai_use_case_factory([gemini])

        first = await use_case.execute("How many prayers?", Language.ENGLISH)
        second = await use_case.execute("  how many PRAYERS?  ", Language.ENGLISH)

        assert len(gemini.calls) == 1
        assert second.cached is True
        assert second.cached_at is not None
        assert second.data == first.data

    @pytest.mark.asyncio
    async def test_language_is_part_of_cache_key(self, ai_use_case_factory):
        gemini = FakeProvider("gemini", GEMINI_RESULT)
        use_case = ai_use_case_factory([gemini])

        await use_case.execute("How many prayers?", Language.ENGLISH)
        result = await use_case.execute("How many prayers?", Language.URDU)

        assert result.cached is False
        assert len(gemini.calls) == 2

    @pytest.mark.asyncio
    async def test_cache_expires(self, ai_use_case_factory, fake_clock):
        gemini = FakeProvider("gemini", GEMINI_RESULT)
        use_case = ai_use_case_factory([gemini])

        await use_case.execute("How many prayers?", Language.ENGLISH)
        fake_clock.advance(61)
        result = await use_case.execute("How many prayers?", Language.ENGLISH)

        assert result.cached is False
        assert len(gemini.calls) == 2

    @pytest.mark.asyncio
    async def test_clear_cache(self, ai_use_case_factory):
        use_case = ai_use_case_factory([FakeProvider("gemini", GEMINI_RESULT)])
        await use_case.execute("q1", Language.ENGLISH)
        await use_case.execute("q2", Language.ENGLISH)

        assert await use_case.clear_cache() == 2

    @pytest.mark.asyncio
    async def test_health_reports_providers_and_cache(self, ai_use_case_factory):
        use_case = ai_use_case_factory([
            FakeProvider("gemini", GEMINI_RESULT, configured=True),
            FakeProvider("huggingface", None, configured=False),
        ])
        await use_case.execute("q1", Language.ENGLISH)

        health = await use_case.health()

        assert health == {"gemini": True, "huggingface": False, "knowledgeBase": True, "cacheSize": 1}


@pytest.mark.unit
class TestMalformedGeminiReply:

    @pytest.mark.asyncio
    async def test_list_body_falls_through_to_next_provider(self, ai_use_case_factory):
        http = httpx.AsyncClient(transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[1, 2])))
        gemini = GeminiClient(api_key="test-key", model="gemini-test", http_client=http)
        huggingface = FakeProvider("huggingface-fallback", HF_RESULT)
        use_case = ai_use_case_factory([gemini, huggingface])

        result = await use_case.execute("How many prayers?", Language.ENGLISH)

        assert result.data["modelMeta"]["model"] == "huggingface-fallback"
