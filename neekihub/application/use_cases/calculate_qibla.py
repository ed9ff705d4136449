"""Use case: Calculate Qibla direction and distance.
Follows Single Responsibility Principle - one use case, one responsibility."""
from typing import Any

from neekihub.application.dto.qibla_dto import QiblaDTO
from neekihub.domain.services.qibla_calculator import KAABA, qibla_for
from neekihub.domain.value_objects.coordinates import Coordinates


class CalculateQiblaUseCase:
    """Validate raw coordinates, run the calculator, round for output.

    Stateless; the result is recomputed on every call.
    """

    def execute(self, latitude: Any, longitude: Any) -> QiblaDTO:
        """Execute use case.

        Args:
            latitude: Raw latitude from the request
            longitude: Raw longitude from the request

        Returns:
            QiblaDTO with values rounded to 2 decimal places

        Raises:
            InvalidCoordinateError: if the coordinates are missing or invalid
        """
        user_location = Coordinates.from_raw(latitude, longitude)
        result = qibla_for(user_location)
        return QiblaDTO.from_result(result, user_location=user_location, kaaba_location=KAABA)
