"""Prayer times API routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, Response

from neekihub.api.responses import success_response
from neekihub.application.use_cases.get_prayer_times import GetPrayerTimesUseCase
from neekihub.config import settings
from neekihub.core.dependencies import get_prayer_times_use_case

router = APIRouter(tags=["prayers"])


@router.get("/prayers")
async def get_prayer_times(
    response: Response,
    city: Optional[str] = Query(None),
    country: Optional[str] = Query(None),
    latitude: Optional[str] = Query(None),
    longitude: Optional[str] = Query(None),
    method: int = Query(settings.PRAYER_CALCULATION_METHOD),
    use_case: GetPrayerTimesUseCase = Depends(get_prayer_times_use_case),
):
    """
    Get today's prayer times by coordinates or by city and country.

    Falls back to approximate timings when the upstream API is down.
    """
    prayer_dto = await use_case.execute(
        method=method,
        city=city,
        country=country,
        latitude=latitude,
        longitude=longitude,
    )

    if prayer_dto.fallback:
        return success_response(
            prayer_dto.to_dict(),
            cached=False,
            fallback=True,
            source=prayer_dto.source,
        )

    response.headers["Cache-Control"] = f"public, max-age={settings.PRAYER_TIMES_CACHE_MAX_AGE}"
    return success_response(prayer_dto.to_dict(), cached=False, source=prayer_dto.source)
