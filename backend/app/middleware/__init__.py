# Middleware package init
"""
TourGuide Backend — Middleware Package
========================================

Middleware Chain (request direction):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

Request ID runs first so the access log line and any error body of the
request carry the same correlation ID.
"""
