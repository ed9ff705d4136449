"""Process-wide pooled httpx client used by the Gemini, HuggingFace and Aladhan clients."""
import httpx
import logging
from typing import Optional

from neekihub.config import settings as app_settings
from neekihub.core.settings import settings

logger = logging.getLogger(__name__)

USER_AGENT = "neekihub-backend/0.1.0 (+https://neekihub.app)"
DEFAULT_HEADERS = {"User-Agent": USER_AGENT, "Accept": "application/json"}

_shared_client: Optional[httpx.AsyncClient] = None


def build_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create an AsyncClient with NeekiHub's headers, pool limits and timeout.

    Individual API clients still pass their own per-request timeout
    (GEMINI_API_TIMEOUT_SECONDS, HF_API_TIMEOUT_SECONDS, PRAYER_API_TIMEOUT_SECONDS);
    HTTP_DEFAULT_TIMEOUT_SECONDS covers anything that does not.
    """
    limits = httpx.Limits(
        max_connections=settings.HTTP_MAX_CONNECTIONS,
        max_keepalive_connections=settings.HTTP_MAX_KEEPALIVE,
    )
    return httpx.AsyncClient(
        headers=DEFAULT_HEADERS,
        timeout=app_settings.HTTP_DEFAULT_TIMEOUT_SECONDS,
        limits=limits,
        http2=settings.HTTP_ENABLE_HTTP2,
        transport=transport,
    )


def get_shared_client() -> httpx.AsyncClient:
    """Return the shared client, creating it on first use."""
    global _shared_client

    if _shared_client is None:
        _shared_client = build_client()
        logger.info(
            f"Outbound HTTP client ready: max_conn={settings.HTTP_MAX_CONNECTIONS}, "
            f"keepalive={settings.HTTP_MAX_KEEPALIVE}, http2={settings.HTTP_ENABLE_HTTP2}, "
            f"timeout={app_settings.HTTP_DEFAULT_TIMEOUT_SECONDS}s"
        )

    return _shared_client


async def close_shared_client():
    """Close the shared client; called from the FastAPI lifespan on shutdown."""
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Outbound HTTP client closed")
