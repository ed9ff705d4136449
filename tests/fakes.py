"""Hand-written stand-ins for the AI providers, clock and prayer source."""
from typing import Any, Dict, List, Optional


class FakeProvider:
    """AnswerProvider stand-in that returns a canned result (or None)."""

    def __init__(self, name: str, result: Optional[Dict[str, Any]], configured: bool = True):
        self.name = name
        self.model_name = name
        self._result = result
        self._configured = configured
        self.calls: List[tuple] = []

    @property
    def is_configured(self) -> bool:
        return self._configured

    async def answer(self, question: str, language: str) -> Optional[Dict[str, Any]]:
        self.calls.append((question, language))
        return self._result


class FakeClock:
    """Manually advanced clock for TTL tests."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakePrayerSource:
    """PrayerTimesSource stand-in recording which lookup was used."""

    def __init__(self, data: Optional[Dict[str, Any]]):
        self._data = data
        self.calls: List[tuple] = []

    async def timings_by_coordinates(self, latitude, longitude, method):
        self.calls.append(("coordinates", latitude, longitude, method))
        return self._data

    async def timings_by_city(self, city, country, method):
        self.calls.append(("city", city, country, method))
        return self._data

