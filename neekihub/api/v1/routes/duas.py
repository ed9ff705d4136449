"""Dua content routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from neekihub.api.dependencies import optional_language
from neekihub.api.responses import success_response
from neekihub.application.use_cases.get_duas import GetDuasUseCase
from neekihub.core.dependencies import get_duas_use_case
from neekihub.domain.value_objects.language import Language

router = APIRouter(tags=["duas"])


@router.get("/duas")
async def list_duas(
    category: Optional[str] = Query(None),
    random: bool = Query(False),
    language: Optional[Language] = Depends(optional_language),
    use_case: GetDuasUseCase = Depends(get_duas_use_case),
):
    """
    List duas, optionally filtered by category ("all" disables the filter).

    With random=true a single dua is returned.
    """
    result = await use_case.list_duas(category, pick_random=random, language=language)
    return success_response(result.data, totalDuas=result.total, cached=False)


@router.get("/duas/{dua_id}")
async def get_dua(
    dua_id: int,
    language: Optional[Language] = Depends(optional_language),
    use_case: GetDuasUseCase = Depends(get_duas_use_case),
):
    """Get a dua by id."""
    return success_response(await use_case.get_dua(dua_id, language))
