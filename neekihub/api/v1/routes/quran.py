"""Quran content routes - thin layer delegating to use cases."""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from neekihub.api.dependencies import optional_language
from neekihub.api.responses import success_response
from neekihub.application.use_cases.get_quran_content import GetQuranContentUseCase
from neekihub.core.dependencies import get_quran_content_use_case
from neekihub.domain.value_objects.language import Language

router = APIRouter(tags=["quran"])


@router.get("/quran/surahs")
async def list_surahs(use_case: GetQuranContentUseCase = Depends(get_quran_content_use_case)):
    """List surahs without their verse bodies."""
    surahs = await use_case.list_surahs()
    return success_response(surahs, total=len(surahs))


@router.get("/quran/surah/{surah_number}")
async def get_surah(
    surah_number: int,
    language: Optional[Language] = Depends(optional_language),
    use_case: GetQuranContentUseCase = Depends(get_quran_content_use_case),
):
    """Get a surah with all bundled verses."""
    return success_response(await use_case.get_surah(surah_number, language))


@router.get("/quran/verse/{surah_number}/{verse_number}")
async def get_verse(
    surah_number: int,
    verse_number: int,
    language: Optional[Language] = Depends(optional_language),
    use_case: GetQuranContentUseCase = Depends(get_quran_content_use_case),
):
    """Get one verse with a short reference to its surah."""
    return success_response(await use_case.get_verse(surah_number, verse_number, language))


@router.get("/verse")
async def find_verse(
    surah: Optional[int] = Query(None),
    ayah: Optional[int] = Query(None),
    random: bool = Query(False),
    language: Optional[Language] = Depends(optional_language),
    use_case: GetQuranContentUseCase = Depends(get_quran_content_use_case),
):
    """
    Get a verse: random, by surah and ayah, or the first bundled verse.
    """
    result = await use_case.find_verse(surah, ayah, pick_random=random, language=language)
    return success_response(result.data, totalVerses=result.total, cached=False)
