"""DTOs for Qibla calculation responses."""
from dataclasses import dataclass
from typing import Dict, Any

from neekihub.domain.value_objects.coordinates import Coordinates
from neekihub.domain.value_objects.qibla_result import QiblaResult


@dataclass
class QiblaDTO:
    """Rounded Qibla result plus the two endpoints it was computed between."""
    qibla_direction: float
    distance_to_kaaba: float
    user_location: Coordinates
    kaaba_location: Coordinates

    @classmethod
    def from_result(
        cls,
        result: QiblaResult,
        user_location: Coordinates,
        kaaba_location: Coordinates,
    ) -> "QiblaDTO":
        """Build from a full-precision result, rounding at this boundary."""
        rounded = result.rounded()
        return cls(
            qibla_direction=rounded.bearing_degrees,
            distance_to_kaaba=rounded.distance_km,
            user_location=user_location,
            kaaba_location=kaaba_location,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "qiblaDirection": self.qibla_direction,
            "distanceToKaaba": self.distance_to_kaaba,
            "userLocation": self.user_location.to_dict(),
            "kaabaLocation": self.kaaba_location.to_dict(),
        }
