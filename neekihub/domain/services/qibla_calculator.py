"""Qibla direction and distance on a spherical Earth.

Bearing is the initial great-circle course from the observer to the Kaaba,
clockwise from true north. Distance uses the haversine formula. No
ellipsoidal (WGS84) correction is applied.
"""
import math
from typing import Any

from neekihub.constants import (
    DEGREES_IN_CIRCLE,
    EARTH_RADIUS_KM,
    KAABA_LATITUDE,
    KAABA_LONGITUDE,
)
from neekihub.domain.value_objects.coordinates import Coordinates
from neekihub.domain.value_objects.qibla_result import QiblaResult

KAABA = Coordinates(latitude=KAABA_LATITUDE, longitude=KAABA_LONGITUDE)


def normalize_bearing(degrees: float) -> float:
    """Map any angle in degrees into [0, 360)."""
    bearing = ((degrees % DEGREES_IN_CIRCLE) + DEGREES_IN_CIRCLE) % DEGREES_IN_CIRCLE
    # -1e-15 % 360 == 360.0 in floating point
    if bearing >= DEGREES_IN_CIRCLE:
        return 0.0
    return bearing


def qibla_bearing(origin: Coordinates) -> float:
    """Initial bearing from origin toward the Kaaba, in degrees [0, 360)."""
    if origin == KAABA:
        # Undefined on the Kaaba itself; atan2 of two rounding residues is noise
        return 0.0

    phi_user = math.radians(origin.latitude)
    phi_kaaba = math.radians(KAABA.latitude)
    delta_lambda = math.radians(KAABA.longitude - origin.longitude)

    y = math.sin(delta_lambda)
    x = math.cos(phi_user) * math.tan(phi_kaaba) - math.sin(phi_user) * math.cos(delta_lambda)

    return normalize_bearing(math.degrees(math.atan2(y, x)))


def haversine_km(origin: Coordinates, target: Coordinates) -> float:
    """Great-circle distance between two coordinates in kilometers."""
    phi1 = math.radians(origin.latitude)
    phi2 = math.radians(target.latitude)
    delta_phi = phi2 - phi1
    delta_lambda = math.radians(target.longitude - origin.longitude)

    a = (
        math.sin(delta_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(delta_lambda / 2) ** 2
    )
    # Guard sqrt(1 - a) against a drifting past 1.0 for antipodal points
    a = min(1.0, max(0.0, a))
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def qibla_for(origin: Coordinates) -> QiblaResult:
    """Full-precision Qibla result for already validated coordinates."""
    return QiblaResult(
        bearing_degrees=qibla_bearing(origin),
        distance_km=haversine_km(origin, KAABA),
    )


def calculate_qibla(latitude: Any, longitude: Any) -> QiblaResult:
    """Compute the Qibla bearing and distance for a raw latitude/longitude pair.

    Args:
        latitude: Degrees in [-90, 90]; numbers or numeric strings
        longitude: Degrees in [-180, 180]; numbers or numeric strings

    Returns:
        QiblaResult at full precision

    Raises:
        InvalidCoordinateError: if either value is missing, non-numeric or out of range
    """
    return qibla_for(Coordinates.from_raw(latitude, longitude))
