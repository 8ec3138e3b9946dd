"""
TourGuide Backend — Point of Interest Schemas
===============================================

Coordinates are strings on purpose (see app/models/point.py). The `order`
field is a plain integer on the wire.
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class PointCreate(BaseModel):
    """
    Body of POST /api/tours/{tourId}/points.

    tourId may be sent but the path parameter always wins.
    """
    tour_id: Optional[int] = Field(default=None, alias="tourId")
    name: str = Field(max_length=255)
    description: Optional[str] = None
    latitude: str = Field(max_length=64, description="Decimal latitude as text, e.g. '48.85'")
    longitude: str = Field(max_length=64, description="Decimal longitude as text, e.g. '2.29'")
    photo_filename: Optional[str] = Field(default=None, alias="photoFilename")
    audio_filename: Optional[str] = Field(default=None, alias="audioFilename")
    video_filename: Optional[str] = Field(default=None, alias="videoFilename")
    order: Optional[int] = None

    model_config = {"populate_by_name": True}

    @field_validator("name", "latitude", "longitude")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v


class PointUpdate(BaseModel):
    """
    Body of PUT /api/points/{id}.

    Kept when omitted:    tourId, name, latitude, longitude
    Cleared when omitted: description, photoFilename, audioFilename,
                          videoFilename, order
    """
    tour_id: Optional[int] = Field(default=None, alias="tourId")
    name: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = None
    latitude: Optional[str] = Field(default=None, max_length=64)
    longitude: Optional[str] = Field(default=None, max_length=64)
    photo_filename: Optional[str] = Field(default=None, alias="photoFilename")
    audio_filename: Optional[str] = Field(default=None, alias="audioFilename")
    video_filename: Optional[str] = Field(default=None, alias="videoFilename")
    order: Optional[int] = None

    model_config = {"populate_by_name": True}


class PointResponse(BaseModel):
    """Full representation of a point of interest."""
    id: int
    tour_id: int = Field(alias="tourId")
    name: str
    description: Optional[str] = None
    latitude: str
    longitude: str
    photo_filename: Optional[str] = Field(default=None, alias="photoFilename")
    audio_filename: Optional[str] = Field(default=None, alias="audioFilename")
    video_filename: Optional[str] = Field(default=None, alias="videoFilename")
    order: Optional[int] = None

    model_config = {"from_attributes": True, "populate_by_name": True}
