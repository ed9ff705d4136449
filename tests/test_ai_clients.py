"""Tests for the Gemini and HuggingFace clients against mocked HTTP."""
import json

import httpx
import pytest

from neekihub.infrastructure.external_apis.gemini_client import GeminiClient, parse_answer_text
from neekihub.infrastructure.external_apis.huggingface_client import HuggingFaceClient


def make_http_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestParseAnswerText:

    def test_fenced_json(self):
        text = '```json\n{"answer": "A", "sources": ["Quran 1:1"], "confidence": "high"}\n```'

        assert parse_answer_text(text) == {
            "answer": "A",
            "sources": ["Quran 1:1"],
            "confidence": "high",
        }

    def test_json_embedded_in_prose(self):
        text = 'Here you go: {"answer": "B", "sources": [], "confidence": "low"} Hope it helps.'

        assert parse_answer_text(text)["answer"] == "B"

    def test_unknown_confidence_becomes_medium(self):
        text = '{"answer": "C", "sources": [], "confidence": "certain"}'

        assert parse_answer_text(text)["confidence"] == "medium"

    def test_plain_text_is_the_answer(self):
        result = parse_answer_text("  Just an answer.  ")

        assert result == {"answer": "Just an answer.", "sources": [], "confidence": "medium"}

    def test_broken_json_falls_back_to_raw_text(self):
        text = '{"answer": "D", "sources": [}'

        assert parse_answer_text(text) == {"answer": text, "sources": [], "confidence": "medium"}


@pytest.mark.unit
class TestGeminiClient:

    @pytest.mark.asyncio
    async def test_answer_success(self, mock_gemini_api):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = request.url
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=mock_gemini_api)

        client = GeminiClient(api_key="test-key", model="gemini-test", http_client=make_http_client(handler))

        result = await client.answer("How many prayers?", "en")

        assert result == {
            "answer": "Salah is prayed five times daily.",
            "sources": ["Quran 2:238"],
            "confidence": "high",
        }
        assert captured["url"].path == "/v1/models/gemini-test:generateContent"
        assert captured["url"].params["key"] == "test-key"
        assert captured["body"]["generationConfig"]["temperature"] == 0.3
        assert captured["body"]["generationConfig"]["maxOutputTokens"] == 1024
        assert "How many prayers?" in captured["body"]["contents"][0]["parts"][0]["text"]

    @pytest.mark.asyncio
    async def test_http_error_returns_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(429, json={"error": {"message": "quota"}})

        client = GeminiClient(api_key="test-key", http_client=make_http_client(handler))

        assert await client.answer("q", "en") is None

    @pytest.mark.asyncio
    async def test_network_error_returns_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        client = GeminiClient(api_key="test-key", http_client=make_http_client(handler))

        assert await client.answer("q", "en") is None

    @pytest.mark.asyncio
    async def test_non_object_body_returns_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[1, 2])

        client = GeminiClient(api_key="test-key", model="gemini-test", http_client=make_http_client(handler))

        assert await client.answer("q", "en") is None

    @pytest.mark.asyncio
    async def test_no_candidates_returns_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"candidates": []})

        client = GeminiClient(api_key="test-key", http_client=make_http_client(handler))

        assert await client.answer("q", "en") is None

    @pytest.mark.asyncio
    async def test_missing_key_skips_request(self, monkeypatch):
        def handler(request: httpx.Request) -> httpx.Response:
            raise AssertionError("no request expected")

        client = GeminiClient(http_client=make_http_client(handler))
        monkeypatch.setattr(client, "api_key", None)

        assert client.is_configured is False
        assert await client.answer("q", "en") is None


@pytest.mark.unit
class TestHuggingFaceClient:

    @pytest.mark.asyncio
    async def test_answer_success(self, mock_huggingface_api):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["auth"] = request.headers["Authorization"]
            captured["path"] = request.url.path
            return httpx.Response(200, json=mock_huggingface_api)

        client = HuggingFaceClient(api_key="hf-key", model="org/model", http_client=make_http_client(handler))

        result = await client.answer("Is fasting obligatory?", "en")

        assert result["answer"] == "Fasting in Ramadan is obligatory."
        assert result["confidence"] == "low"
        assert result["sources"] == []
        assert result["note"] == "Fallback model used - sources may be limited"
        assert captured["auth"] == "Bearer hf-key"
        assert captured["path"] == "/models/org/model"

    @pytest.mark.asyncio
    async def test_dict_response_shape(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"generated_text": "Answer"})

        client = HuggingFaceClient(api_key="hf-key", http_client=make_http_client(handler))

        assert (await client.answer("q", "en"))["answer"] == "Answer"

    @pytest.mark.asyncio
    async def test_model_loading_error_returns_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(503, json={"error": "Model is currently loading"})

        client = HuggingFaceClient(api_key="hf-key", http_client=make_http_client(handler))

        assert await client.answer("q", "en") is None

    @pytest.mark.asyncio
    async def test_empty_generation_returns_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[{"generated_text": ""}])

        client = HuggingFaceClient(api_key="hf-key", http_client=make_http_client(handler))

        assert await client.answer("q", "en") is None
