"""
TourGuide Backend — User Schemas
==================================

The password hash never leaves the service layer: UserResponse has no
password field at all, so it cannot be serialised by accident.
"""

from pydantic import BaseModel, Field, field_validator


class UserCreate(BaseModel):
    """Body of POST /api/users/register."""
    username: str = Field(min_length=1, max_length=255, description="Unique login name")
    password: str = Field(min_length=1, description="Plaintext password (hashed before storage)")

    @field_validator("username", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("password")
    @classmethod
    def fits_bcrypt(cls, v: str) -> str:
        # bcrypt only reads 72 bytes; recent releases reject longer input outright
        if len(v.encode("utf-8")) > 72:
            raise ValueError("must be at most 72 bytes")
        return v


class UserResponse(BaseModel):
    """Public view of a user."""
    id: int = Field(description="User identifier")
    username: str = Field(description="Login name")

    model_config = {"from_attributes": True}
