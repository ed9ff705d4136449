"""Coordinate value object - immutable and validated."""
import math
from dataclasses import dataclass
from typing import Any

from neekihub.domain.exceptions import InvalidCoordinateError

LATITUDE_RANGE = (-90.0, 90.0)
LONGITUDE_RANGE = (-180.0, 180.0)


def _parse_component(value: Any, field: str) -> float:
    """Coerce one raw coordinate component to a finite float."""
    if value is None or (isinstance(value, str) and not value.strip()):
        raise InvalidCoordinateError(f"{field.capitalize()} is required", field=field)
    # bool is an int subclass; true/false is never a coordinate
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise InvalidCoordinateError(f"{field.capitalize()} must be a number", field=field)
    try:
        number = float(value)
    except ValueError:
        raise InvalidCoordinateError(f"{field.capitalize()} must be a number", field=field)
    except OverflowError:
        raise InvalidCoordinateError(f"{field.capitalize()} is out of range", field=field)
    if not math.isfinite(number):
        raise InvalidCoordinateError(f"{field.capitalize()} must be a finite number", field=field)
    return number


@dataclass(frozen=True)
class Coordinates:
    """Immutable coordinate value object."""
    latitude: float
    longitude: float

    def __post_init__(self):
        """Validate coordinates."""
        low, high = LATITUDE_RANGE
        if not low <= self.latitude <= high:
            raise InvalidCoordinateError(
                f"Latitude must be between -90 and 90, got {self.latitude}",
                field="latitude",
            )
        low, high = LONGITUDE_RANGE
        if not low <= self.longitude <= high:
            raise InvalidCoordinateError(
                f"Longitude must be between -180 and 180, got {self.longitude}",
                field="longitude",
            )

    @classmethod
    def from_raw(cls, latitude: Any, longitude: Any) -> "Coordinates":
        """Build coordinates from untrusted input (JSON numbers or numeric strings).

        Raises:
            InvalidCoordinateError: if either value is missing, non-numeric,
                non-finite or out of range
        """
        return cls(
            latitude=_parse_component(latitude, "latitude"),
            longitude=_parse_component(longitude, "longitude"),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"latitude": self.latitude, "longitude": self.longitude}
