"""AI Q&A routes."""
from fastapi import APIRouter, Depends

from neekihub.api.dependencies import verify_admin_key
from neekihub.api.responses import success_response, utc_timestamp
from neekihub.api.v1.schemas.ai_schemas import AskRequestSchema
from neekihub.application.use_cases.ask_question import AskQuestionUseCase
from neekihub.core.dependencies import get_ask_question_use_case
from neekihub.domain.value_objects.language import Language

router = APIRouter(prefix="/ai", tags=["ai"])


@router.post("")
async def ask_question(
    request: AskRequestSchema,
    use_case: AskQuestionUseCase = Depends(get_ask_question_use_case),
):
    """
    Answer an Islamic question.

    Tries Gemini, then HuggingFace, then the bundled knowledge base.
    """
    language = Language.from_code(request.lang)
    result = await use_case.execute(request.question, language)

    if result.cached:
        return success_response(result.data, cached=True, timestamp=result.cached_at.isoformat())
    return success_response(result.data, cached=False)


@router.delete("/cache")
async def clear_cache(
    _: bool = Depends(verify_admin_key),
    use_case: AskQuestionUseCase = Depends(get_ask_question_use_case),
):
    """Drop every cached answer (admin only)."""
    removed = await use_case.clear_cache()
    return success_response({"removed": removed})


@router.get("/health")
async def ai_health(use_case: AskQuestionUseCase = Depends(get_ask_question_use_case)):
    """Which providers are configured and how many answers are cached."""
    status = await use_case.health()
    return {"success": True, **status, "timestamp": utc_timestamp()}
