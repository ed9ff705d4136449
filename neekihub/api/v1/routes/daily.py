"""Daily content route."""
from datetime import date, datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends, Query

from neekihub.api.dependencies import optional_language
from neekihub.api.responses import success_response
from neekihub.application.use_cases.get_daily_content import GetDailyContentUseCase
from neekihub.core.dependencies import get_daily_content_use_case
from neekihub.domain.value_objects.language import Language

router = APIRouter(tags=["daily"])


@router.get("/daily")
async def get_daily_content(
    day: Optional[date] = Query(None, alias="date"),
    language: Optional[Language] = Depends(optional_language),
    use_case: GetDailyContentUseCase = Depends(get_daily_content_use_case),
):
    """Verse, hadith and dua of the day (defaults to today, UTC)."""
    if day is None:
        day = datetime.now(timezone.utc).date()
    return success_response(await use_case.execute(day, language))
