"""Gemini API client for AI-powered Islamic Q&A."""
import re
import httpx
from typing import Optional, Dict, Any, List
import logging
import json

from neekihub.application.prompts import build_question_prompt
from neekihub.config import settings
from neekihub.constants import CONFIDENCE_LEVELS, CONFIDENCE_MEDIUM
from neekihub.core.settings import settings as core_settings
from neekihub.infrastructure.external_apis.http_client import get_shared_client

logger = logging.getLogger(__name__)

JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")

SAFETY_SETTINGS = [
    {
        "category": "HARM_CATEGORY_HARASSMENT",
        "threshold": "BLOCK_MEDIUM_AND_ABOVE"
    },
    {
        "category": "HARM_CATEGORY_HATE_SPEECH",
        "threshold": "BLOCK_MEDIUM_AND_ABOVE"
    }
]


def parse_answer_text(text: str) -> Dict[str, Any]:
    """Turn model text into {answer, sources, confidence}.

    The model is asked for JSON but may wrap it in markdown fences or prose.
    Anything that does not parse becomes a plain answer with no sources.
    """
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    cleaned = cleaned.strip()

    match = JSON_OBJECT_PATTERN.search(cleaned)
    if match:
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError as e:
            logger.warning(f"Gemini answer was not valid JSON, using raw text: {e}")
        else:
            if isinstance(parsed, dict):
                sources = parsed.get("sources") or []
                confidence = parsed.get("confidence")
                return {
                    "answer": parsed.get("answer") or text,
                    "sources": [str(s) for s in sources] if isinstance(sources, list) else [],
                    "confidence": confidence if confidence in CONFIDENCE_LEVELS else CONFIDENCE_MEDIUM,
                }

    return {"answer": text.strip(), "sources": [], "confidence": CONFIDENCE_MEDIUM}


class GeminiClient:
    """Client for Google Gemini API."""

    BASE_URL = "https://generativelanguage.googleapis.com/v1"
    name = "gemini"

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key or core_settings.GEMINI_API_KEY
        self.model = model or core_settings.GEMINI_MODEL
        self._http_client = http_client
        if not self.api_key:
            logger.warning("GEMINI_API_KEY not set")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @property
    def model_name(self) -> str:
        return self.model

    def _client(self) -> httpx.AsyncClient:
        return self._http_client or get_shared_client()

    async def generate_text(self, prompt: str) -> Optional[str]:
        """Generate plain text content using Gemini API.

        Args:
            prompt: The prompt to send to Gemini

        Returns:
            Generated text or None if error
        """
        if not self.api_key:
            logger.error("Cannot call Gemini: API key missing")
            return None

        url = f"{self.BASE_URL}/models/{self.model}:generateContent"

        params = {
            "key": self.api_key
        }

        payload: Dict[str, Any] = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt}
                    ]
                }
            ],
            "generationConfig": {
                "temperature": settings.GEMINI_TEMPERATURE,
                "topK": settings.GEMINI_TOP_K,
                "topP": settings.GEMINI_TOP_P,
                "maxOutputTokens": settings.GEMINI_MAX_OUTPUT_TOKENS,
            },
            "safetySettings": SAFETY_SETTINGS,
        }

        try:
            timeout = float(settings.GEMINI_API_TIMEOUT_SECONDS)
            logger.info(f"Calling Gemini model {self.model} for text generation")
            response = await self._client().post(url, params=params, json=payload, timeout=timeout)
            response.raise_for_status()
            data = response.json()
            if not isinstance(data, dict):
                logger.error(f"Gemini response is not a JSON object: {type(data).__name__}")
                return None

            # Extract text from response
            candidates: List[Dict[str, Any]] = data.get("candidates", [])
            if not candidates:
                logger.error("Gemini response has no candidates")
                return None

            # Collect all text parts
            text = ""
            parts = candidates[0].get("content", {}).get("parts", [])
            for part in parts:
                if "text" in part:
                    text += part["text"]

            if not text:
                logger.error("Gemini candidate had no text content")
                preview_length = settings.RESPONSE_TEXT_PREVIEW_LENGTH
                logger.error(f"Full response: {json.dumps(data)[:preview_length]}")
                return None

            preview_length = settings.RESPONSE_TEXT_PREVIEW_LENGTH
            logger.info(f"Gemini response text (first {preview_length} chars): {text[:preview_length]}")
            return text.strip()

        except httpx.HTTPStatusError as e:
            # Log JSON error body if present
            truncation_length = settings.ERROR_MESSAGE_TRUNCATION_LENGTH
            try:
                err = e.response.json()
                logger.error(f"HTTP error with Gemini: {e.response.status_code} - {json.dumps(err)[:truncation_length]}")
            except ValueError:
                logger.error(f"HTTP error with Gemini: {e.response.status_code} - {e.response.text[:truncation_length]}")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error calling Gemini API: {e}")
            return None

    async def answer(self, question: str, language: str) -> Optional[Dict[str, Any]]:
        """Answer an Islamic question.

        Args:
            question: User question, already validated
            language: Language code the answer should be written in

        Returns:
            {"answer", "sources", "confidence"} or None if Gemini is unavailable
        """
        text = await self.generate_text(build_question_prompt(question, language))
        if text is None:
            return None
        return parse_answer_text(text)
