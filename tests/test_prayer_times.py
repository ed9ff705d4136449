"""Tests for the Aladhan client and the prayer times use case."""
from datetime import datetime, timezone

import httpx
import pytest

from neekihub.application.use_cases.get_prayer_times import FALLBACK_TIMINGS, GetPrayerTimesUseCase
from neekihub.domain.exceptions import (
    InvalidCoordinateError,
    PrayerQueryError,
    UpstreamUnavailableError,
)
from neekihub.infrastructure.external_apis.aladhan_client import AladhanClient
from tests.fakes import FakePrayerSource

FIXED_NOW = datetime(2024, 7, 1, 12, 0, tzinfo=timezone.utc)


def make_http_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.unit
class TestAladhanClient:

    @pytest.mark.asyncio
    async def test_timings_by_coordinates(self, mock_aladhan_api):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = request.url
            return httpx.Response(200, json=mock_aladhan_api)

        client = AladhanClient(base_url="https://aladhan.test/v1", http_client=make_http_client(handler))

        data = await client.timings_by_coordinates(40.7128, -74.006, 2)

        assert data["timings"]["Fajr"] == "04:12"
        assert captured["url"].path == "/v1/timings"
        assert captured["url"].params["latitude"] == "40.7128"
        assert captured["url"].params["method"] == "2"

    @pytest.mark.asyncio
    async def test_timings_by_city(self, mock_aladhan_api):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = request.url
            return httpx.Response(200, json=mock_aladhan_api)

        client = AladhanClient(base_url="https://aladhan.test/v1", http_client=make_http_client(handler))

        await client.timings_by_city("Karachi", "Pakistan", 1)

        assert captured["url"].path == "/v1/timingsByCity"
        assert captured["url"].params["city"] == "Karachi"
        assert captured["url"].params["country"] == "Pakistan"

    @pytest.mark.asyncio
    async def test_non_200_code_returns_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"code": 400, "status": "BAD_REQUEST", "data": "Invalid city"})

        client = AladhanClient(http_client=make_http_client(handler))

        assert await client.timings_by_city("Nowhere", "Noland", 2) is None

    @pytest.mark.asyncio
    async def test_server_error_returns_none(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, text="boom")

        client = AladhanClient(http_client=make_http_client(handler))

        assert await client.timings_by_coordinates(0, 0, 2) is None


@pytest.mark.unit
class TestGetPrayerTimesUseCase:

    @pytest.mark.asyncio
    async def test_coordinates_take_precedence(self, mock_aladhan_api):
        source = FakePrayerSource(mock_aladhan_api["data"])
        use_case = GetPrayerTimesUseCase(source)

        result = await use_case.execute(2, city="Karachi", country="Pakistan", latitude="40.7128", longitude="-74.006")

        assert source.calls == [("coordinates", 40.7128, -74.006, 2)]
        assert result.location["latitude"] == 40.7128
        assert result.fallback is False

    @pytest.mark.asyncio
    async def test_city_lookup_keeps_only_prayer_timings(self, mock_aladhan_api):
        source = FakePrayerSource(mock_aladhan_api["data"])
        use_case = GetPrayerTimesUseCase(source)

        result = await use_case.execute(2, city=" Karachi ", country="Pakistan")

        assert source.calls == [("city", "Karachi", "Pakistan", 2)]
        assert list(result.timings) == ["Fajr", "Sunrise", "Dhuhr", "Asr", "Maghrib", "Isha"]
        assert result.method == "Islamic Society of North America (ISNA)"
        assert result.date["readable"] == "01 Jul 2024"

    @pytest.mark.asyncio
    async def test_missing_location(self):
        use_case = GetPrayerTimesUseCase(FakePrayerSource(None))

        with pytest.raises(PrayerQueryError, match="city & country or latitude & longitude"):
            await use_case.execute(2, city="Karachi")

    @pytest.mark.asyncio
    async def test_invalid_coordinates(self):
        use_case = GetPrayerTimesUseCase(FakePrayerSource(None))

        with pytest.raises(InvalidCoordinateError) as exc_info:
            await use_case.execute(2, latitude="95", longitude="10")
        assert exc_info.value.field == "latitude"

    @pytest.mark.asyncio
    async def test_upstream_failure_serves_fallback(self):
        use_case = GetPrayerTimesUseCase(FakePrayerSource(None), clock=lambda: FIXED_NOW)

        result = await use_case.execute(2, city="Karachi", country="Pakistan")

        assert result.fallback is True
        assert result.timings == FALLBACK_TIMINGS
        assert result.date["gregorian"]["date"] == "01-07-2024"

    @pytest.mark.asyncio
    async def test_upstream_failure_without_fallback(self):
        use_case = GetPrayerTimesUseCase(FakePrayerSource(None), fallback_enabled=False)

        with pytest.raises(UpstreamUnavailableError) as exc_info:
            await use_case.execute(2, city="Karachi", country="Pakistan")
        assert exc_info.value.status_code == 502
