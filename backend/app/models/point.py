"""
TourGuide Backend — Point of Interest SQLAlchemy Model
========================================================

What:  ORM model representing the `points_of_interest` table.
Who:   Used by PointOfInterestService.

Table Design Rationale:
    - tour_id is NOT NULL: a point cannot exist outside a tour.
    - latitude/longitude are strings: clients send decimal strings and get
      the exact same text back (no float round-tripping).
    - media columns hold generated filenames from the media store, not paths.
    - `order` is stored as display_order (ORDER is a reserved SQL word). It
      is neither unique nor contiguous; listing sorts by it, then by id.

Query Patterns:
    - Points of a tour: WHERE tour_id = :id ORDER BY display_order, id
      → idx_points_tour_order covers both the filter and the sort
"""

from typing import Optional

from sqlalchemy import ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class PointOfInterest(Base):
    """A geolocated stop within a tour."""

    __tablename__ = "points_of_interest"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    tour_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("tours.id"),
        nullable=False,
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True, default=None)

    latitude: Mapped[str] = mapped_column(String(64), nullable=False)
    longitude: Mapped[str] = mapped_column(String(64), nullable=False)

    # ── Media Attachments ─────────────────────────────────────────────────
    photo_filename: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    audio_filename: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    video_filename: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    order: Mapped[Optional[int]] = mapped_column(
        "display_order",
        Integer,
        nullable=True,
        comment="Display position within the tour (ascending)",
    )

    __table_args__ = (
        Index("idx_points_tour_order", "tour_id", "display_order"),
    )

    def __repr__(self) -> str:
        return (
            f"<PointOfInterest(id={self.id}, tour_id={self.tour_id}, "
            f"name='{self.name}', order={self.order})>"
        )
