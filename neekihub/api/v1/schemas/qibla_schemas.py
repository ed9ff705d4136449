"""Schemas for the Qibla endpoint."""
from typing import Any, Dict
from pydantic import BaseModel, ConfigDict, Field


class QiblaRequestSchema(BaseModel):
    """Raw coordinates; range and type checks happen in the domain."""
    latitude: Any = None
    longitude: Any = None


class LocationSchema(BaseModel):
    """A point on the globe."""
    latitude: float
    longitude: float


class QiblaDataSchema(BaseModel):
    """Qibla bearing and distance, rounded to 2 decimal places."""
    model_config = ConfigDict(populate_by_name=True)

    qibla_direction: float = Field(alias="qiblaDirection")
    distance_to_kaaba: float = Field(alias="distanceToKaaba")
    user_location: LocationSchema = Field(alias="userLocation")
    kaaba_location: LocationSchema = Field(alias="kaabaLocation")


class QiblaResponseSchema(BaseModel):
    """Success envelope for POST /qibla."""
    success: bool = True
    data: QiblaDataSchema
    meta: Dict[str, Any]
