"""HuggingFace Inference API client - fallback text generation."""
import httpx
from typing import Optional, Dict, Any
import logging

from neekihub.application.prompts import build_plain_prompt
from neekihub.config import settings
from neekihub.constants import CONFIDENCE_LOW, HUGGINGFACE_FALLBACK_NOTE, MODEL_HUGGINGFACE_FALLBACK
from neekihub.core.settings import settings as core_settings
from neekihub.infrastructure.external_apis.http_client import get_shared_client

logger = logging.getLogger(__name__)


class HuggingFaceClient:
    """Client for the HuggingFace hosted inference API."""

    BASE_URL = "https://api-inference.huggingface.co/models"
    name = "huggingface"
    model_name = MODEL_HUGGINGFACE_FALLBACK

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.api_key = api_key or core_settings.HF_API_KEY
        self.model = model or core_settings.HF_MODEL
        self._http_client = http_client
        if not self.api_key:
            logger.warning("HF_API_KEY not set")

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    def _client(self) -> httpx.AsyncClient:
        return self._http_client or get_shared_client()

    @staticmethod
    def _extract_text(data: Any) -> Optional[str]:
        """Inference API returns either [{generated_text}] or {generated_text}."""
        if isinstance(data, list) and data and isinstance(data[0], dict):
            return data[0].get("generated_text")
        if isinstance(data, dict):
            return data.get("generated_text")
        return None

    async def answer(self, question: str, language: str) -> Optional[Dict[str, Any]]:
        """Generate an answer with the fallback model.

        Args:
            question: User question, already validated
            language: Requested language (the model does not honour it)

        Returns:
            {"answer", "sources", "confidence", "note"} or None if error
        """
        if not self.api_key:
            logger.error("Cannot call HuggingFace: API key missing")
            return None

        url = f"{self.BASE_URL}/{self.model}"
        headers = {"Authorization": f"Bearer {self.api_key}"}
        payload = {
            "inputs": build_plain_prompt(question),
            "parameters": {
                "max_length": settings.HF_MAX_LENGTH,
                "temperature": settings.HF_TEMPERATURE,
                "top_p": settings.HF_TOP_P,
            }
        }

        try:
            logger.info(f"Calling HuggingFace model {self.model}")
            response = await self._client().post(
                url,
                headers=headers,
                json=payload,
                timeout=float(settings.HF_API_TIMEOUT_SECONDS),
            )
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            truncation_length = settings.ERROR_MESSAGE_TRUNCATION_LENGTH
            logger.error(f"HTTP error with HuggingFace: {e.response.status_code} - {e.response.text[:truncation_length]}")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error calling HuggingFace API: {e}")
            return None

        text = self._extract_text(data)
        if not text:
            logger.error("HuggingFace response had no generated text")
            return None

        return {
            "answer": text.strip(),
            "sources": [],
            "confidence": CONFIDENCE_LOW,
            "note": HUGGINGFACE_FALLBACK_NOTE,
        }
