"""
TourGuide Backend — Tour Schemas
==================================

Create vs update:
    TourCreate requires name and location (non-blank).
    TourUpdate makes every field optional; TourService decides per field
    whether a missing value means "keep" or "clear".
"""

from typing import Optional

from pydantic import BaseModel, Field, field_validator


class TourCreate(BaseModel):
    """Body of POST /api/tours."""
    name: str = Field(max_length=255, description="Tour title")
    location: str = Field(max_length=255, description="City or area the tour covers")
    description: Optional[str] = Field(default=None)
    created_by_id: Optional[int] = Field(
        default=None,
        alias="createdById",
        description="ID of the creating user; must exist if supplied",
    )

    model_config = {"populate_by_name": True}

    @field_validator("name", "location")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v


class TourUpdate(BaseModel):
    """
    Body of PUT /api/tours/{id}.

    name/location: kept when omitted.
    description:   cleared when omitted.
    createdById:   creator kept when omitted, re-resolved when given.
    """
    name: Optional[str] = Field(default=None, max_length=255)
    location: Optional[str] = Field(default=None, max_length=255)
    description: Optional[str] = Field(default=None)
    created_by_id: Optional[int] = Field(default=None, alias="createdById")

    model_config = {"populate_by_name": True}


class TourResponse(BaseModel):
    """Full representation of a tour."""
    id: int
    name: str
    location: str
    description: Optional[str] = None
    created_by_id: Optional[int] = Field(default=None, alias="createdById")

    model_config = {"from_attributes": True, "populate_by_name": True}
