"""Use case: Get prayer times for a location.
Follows Single Responsibility Principle - one use case, one responsibility."""
import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any, Callable

from neekihub.application.dto.prayer_dto import PrayerTimesDTO
from neekihub.application.ports.prayer_times import PrayerTimesSource
from neekihub.constants import (
    HTTP_BAD_GATEWAY,
    PRAYER_NAMES,
    SOURCE_ALADHAN,
    SOURCE_PRAYER_FALLBACK,
)
from neekihub.domain.exceptions import PrayerQueryError, UpstreamUnavailableError
from neekihub.domain.value_objects.coordinates import Coordinates

logger = logging.getLogger(__name__)

# Served when the upstream API is unreachable
FALLBACK_TIMINGS = {
    "Fajr": "05:30",
    "Sunrise": "06:50",
    "Dhuhr": "12:15",
    "Asr": "15:30",
    "Maghrib": "17:45",
    "Isha": "19:00",
}
FALLBACK_METHOD_NAME = "Islamic Society of North America (ISNA)"


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def build_fallback_date(now: datetime) -> Dict[str, Any]:
    """Gregorian date block shaped like Aladhan's, without a Hijri conversion."""
    return {
        "readable": now.strftime("%d %b %Y"),
        "timestamp": str(int(now.timestamp())),
        "gregorian": {
            "date": now.strftime("%d-%m-%Y"),
            "format": "DD-MM-YYYY",
            "day": now.strftime("%d"),
            "weekday": {"en": now.strftime("%A")},
            "month": {"number": now.month, "en": now.strftime("%B")},
            "year": str(now.year),
        },
    }


class GetPrayerTimesUseCase:
    """Proxy prayer time lookups to the upstream source, with mocked fallback data."""

    def __init__(
        self,
        source: PrayerTimesSource,
        fallback_enabled: bool = True,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._source = source
        self._fallback_enabled = fallback_enabled
        self._clock = clock

    async def execute(
        self,
        method: int,
        city: Optional[str] = None,
        country: Optional[str] = None,
        latitude: Any = None,
        longitude: Any = None,
    ) -> PrayerTimesDTO:
        """Execute use case.

        Coordinates take precedence over city and country.

        Raises:
            InvalidCoordinateError: if coordinates are given but invalid
            PrayerQueryError: if neither coordinates nor city and country are given
            UpstreamUnavailableError: if the upstream fails and fallback is disabled
        """
        location: Dict[str, Any] = {
            "city": city,
            "country": country,
            "latitude": None,
            "longitude": None,
        }

        if not _is_blank(latitude) or not _is_blank(longitude):
            coordinates = Coordinates.from_raw(latitude, longitude)
            location.update(coordinates.to_dict())
            data = await self._source.timings_by_coordinates(
                coordinates.latitude, coordinates.longitude, method
            )
        elif not _is_blank(city) and not _is_blank(country):
            data = await self._source.timings_by_city(city.strip(), country.strip(), method)
        else:
            raise PrayerQueryError("Please provide either city & country or latitude & longitude")

        if data is not None:
            timings = data.get("timings", {})
            method_info = data.get("meta", {}).get("method", {})
            return PrayerTimesDTO(
                date=data.get("date", {}),
                timings={name: timings.get(name) for name in PRAYER_NAMES},
                method=method_info.get("name"),
                location=location,
                source=SOURCE_ALADHAN,
            )

        if not self._fallback_enabled:
            raise UpstreamUnavailableError("Failed to fetch prayer times", status_code=HTTP_BAD_GATEWAY)

        logger.warning(f"Prayer times upstream unavailable, serving fallback timings for {location}")
        return PrayerTimesDTO(
            date=build_fallback_date(self._clock()),
            timings=dict(FALLBACK_TIMINGS),
            method=FALLBACK_METHOD_NAME,
            location=location,
            source=SOURCE_PRAYER_FALLBACK,
            fallback=True,
        )
