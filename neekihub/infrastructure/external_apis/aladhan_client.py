"""Aladhan API client for prayer times."""
import httpx
from typing import Optional, Dict, Any
import logging

from neekihub.config import settings
from neekihub.infrastructure.external_apis.http_client import get_shared_client

logger = logging.getLogger(__name__)


class AladhanClient:
    """Client for the Aladhan prayer times API (timings by coordinates or city)."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        self.base_url = (base_url or settings.ALADHAN_BASE_URL).rstrip("/")
        self._http_client = http_client

    def _client(self) -> httpx.AsyncClient:
        return self._http_client or get_shared_client()

    async def _fetch(self, path: str, params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """GET an Aladhan endpoint and unwrap its "data" object.

        Returns:
            The "data" object, or None if the request failed or code != 200
        """
        url = f"{self.base_url}/{path}"
        try:
            response = await self._client().get(
                url,
                params=params,
                timeout=float(settings.PRAYER_API_TIMEOUT_SECONDS),
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            truncation_length = settings.ERROR_MESSAGE_TRUNCATION_LENGTH
            logger.error(f"HTTP error with Aladhan: {e.response.status_code} - {e.response.text[:truncation_length]}")
            return None
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching prayer times: {e}")
            return None

        if not isinstance(payload, dict) or payload.get("code") != 200:
            logger.error(f"Prayer times API error: code={payload.get('code') if isinstance(payload, dict) else None}")
            return None

        data = payload.get("data")
        if not isinstance(data, dict) or "timings" not in data:
            logger.error("Prayer times API response missing timings")
            return None
        return data

    async def timings_by_coordinates(
        self,
        latitude: float,
        longitude: float,
        method: int
    ) -> Optional[Dict[str, Any]]:
        """Fetch today's timings for a coordinate.

        Args:
            latitude: Latitude of the location
            longitude: Longitude of the location
            method: Aladhan calculation method id (2 = ISNA)

        Returns:
            Aladhan "data" object or None if error
        """
        return await self._fetch(
            "timings",
            {"latitude": latitude, "longitude": longitude, "method": method},
        )

    async def timings_by_city(
        self,
        city: str,
        country: str,
        method: int
    ) -> Optional[Dict[str, Any]]:
        """Fetch today's timings for a city.

        Args:
            city: City name
            country: Country name
            method: Aladhan calculation method id (2 = ISNA)

        Returns:
            Aladhan "data" object or None if error
        """
        return await self._fetch(
            "timingsByCity",
            {"city": city, "country": country, "method": method},
        )
