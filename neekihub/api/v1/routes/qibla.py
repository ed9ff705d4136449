"""Qibla API routes - thin layer delegating to use cases.
Follows Single Responsibility Principle - only handles HTTP concerns."""
from fastapi import APIRouter, Depends

from neekihub.api.responses import utc_timestamp
from neekihub.api.v1.schemas.qibla_schemas import (
    QiblaDataSchema,
    QiblaRequestSchema,
    QiblaResponseSchema,
)
from neekihub.application.use_cases.calculate_qibla import CalculateQiblaUseCase
from neekihub.core.dependencies import get_calculate_qibla_use_case

router = APIRouter(tags=["qibla"])


@router.post("/qibla", response_model=QiblaResponseSchema)
async def calculate_qibla(
    request: QiblaRequestSchema,
    use_case: CalculateQiblaUseCase = Depends(get_calculate_qibla_use_case),
):
    """
    Calculate the Qibla direction and distance to the Kaaba.

    Invalid coordinates are reported as 400 with the offending field.
    """
    qibla_dto = use_case.execute(request.latitude, request.longitude)

    # Convert DTO to Pydantic schema
    return QiblaResponseSchema(
        data=QiblaDataSchema(**qibla_dto.to_dict()),
        meta={"timestamp": utc_timestamp()},
    )
