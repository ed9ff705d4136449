"""Qibla result value object."""
from dataclasses import dataclass

from neekihub.constants import DEGREES_IN_CIRCLE, QIBLA_DECIMAL_PLACES


@dataclass(frozen=True)
class QiblaResult:
    """Bearing toward the Kaaba and great-circle distance to it.

    Values are kept at full precision; use rounded() at the output boundary.
    """
    bearing_degrees: float
    distance_km: float

    def __post_init__(self):
        """Validate result ranges."""
        if not 0.0 <= self.bearing_degrees < DEGREES_IN_CIRCLE:
            raise ValueError(f"Bearing must be in [0, 360), got {self.bearing_degrees}")
        if self.distance_km < 0:
            raise ValueError(f"Distance cannot be negative, got {self.distance_km}")

    def rounded(self, places: int = QIBLA_DECIMAL_PLACES) -> "QiblaResult":
        """Round both values, keeping the bearing inside [0, 360)."""
        bearing = round(self.bearing_degrees, places)
        if bearing >= DEGREES_IN_CIRCLE:
            bearing = 0.0
        return QiblaResult(bearing_degrees=bearing, distance_km=round(self.distance_km, places))
