"""
TourGuide Backend — Media Schemas
"""

from pydantic import BaseModel, Field


class UploadResponse(BaseModel):
    """Returned by POST /api/media/upload/{kind}."""
    filename: str = Field(description="Generated filename; store it on a point of interest")
    path: str = Field(description="URL path that serves the file, e.g. /api/media/photos/<filename>")
