"""
TourGuide Backend — Tour SQLAlchemy Model
===========================================

What:  ORM model representing the `tours` table.
Who:   Used by TourService; parent of PointOfInterest rows.

Lifecycle:
    1. Created via POST /api/tours (creator optional)
    2. Mutable fields updated in place via PUT /api/tours/{id}
    3. Deleted via DELETE /api/tours/{id}; TourService removes the child
       points first in the same transaction
"""

from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Tour(Base):
    """A named collection of ordered points of interest."""

    __tablename__ = "tours"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    location: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    # Nullable: tours may be anonymous. No ON DELETE rule because users are
    # never deleted in this system.
    created_by_id: Mapped[Optional[int]] = mapped_column(
        Integer,
        ForeignKey("users.id"),
        nullable=True,
        index=True,
        comment="User who created the tour, if any",
    )

    def __repr__(self) -> str:
        return f"<Tour(id={self.id}, name='{self.name}', location='{self.location}')>"
