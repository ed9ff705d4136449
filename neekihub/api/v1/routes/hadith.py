"""Hadith content routes."""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from neekihub.api.dependencies import optional_language
from neekihub.api.responses import success_response
from neekihub.application.use_cases.get_hadith import GetHadithUseCase
from neekihub.core.dependencies import get_hadith_use_case
from neekihub.domain.value_objects.language import Language

router = APIRouter(tags=["hadith"])


@router.get("/hadith")
async def get_hadith(
    collection: Optional[str] = Query(None),
    random: bool = Query(False),
    language: Optional[Language] = Depends(optional_language),
    use_case: GetHadithUseCase = Depends(get_hadith_use_case),
):
    """Get one hadith, random or the first of the (filtered) collection."""
    result = await use_case.execute(collection, pick_random=random, language=language)
    return success_response(result.data, totalHadiths=result.total, cached=False)
