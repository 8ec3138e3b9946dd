# Models package init
"""
TourGuide Backend — ORM Models
================================

Importing this package registers every table with `Base.metadata`, which
Alembic autogenerate and the test-suite's `create_all` both rely on.
"""

from app.models.user import User
from app.models.tour import Tour
from app.models.point import PointOfInterest

__all__ = ["User", "Tour", "PointOfInterest"]
