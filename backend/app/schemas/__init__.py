# Schemas package init
"""
TourGuide Backend — Pydantic Schemas
======================================

API contracts, kept separate from the ORM models. Field names are
snake_case in Python and camelCase on the wire (`createdById`, `tourId`,
`photoFilename`, ...); request bodies accept either spelling.
"""
