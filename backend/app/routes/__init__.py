# Routes package init
"""
TourGuide Backend — API Routes Package
========================================

Route Inventory:
    - users.py:   POST /api/users/register, GET /api/users/{id},
                  GET /api/users/{id}/tours
    - tours.py:   GET/POST /api/tours, GET/PUT/DELETE /api/tours/{id}
    - points.py:  GET/POST /api/tours/{tour_id}/points,
                  GET/PUT/DELETE /api/points/{id}
    - media.py:   POST /api/media/upload/{photo|audio|video},
                  GET/DELETE /api/media/{photos|audio|videos}/{filename}
    - health.py:  GET /health

Routes stay THIN: extract request data, call a service, pick the status
code. Business rules live in app/services.
"""
