"""Prayer times source interface."""
from typing import Protocol, Optional, Dict, Any


class PrayerTimesSource(Protocol):
    async def timings_by_coordinates(
        self, latitude: float, longitude: float, method: int
    ) -> Optional[Dict[str, Any]]:
        """Return the upstream "data" object for coordinates or None on failure."""

    async def timings_by_city(
        self, city: str, country: str, method: int
    ) -> Optional[Dict[str, Any]]:
        """Return the upstream "data" object for a city or None on failure."""
