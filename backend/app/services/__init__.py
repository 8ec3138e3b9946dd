# Services package init
"""
TourGuide Backend — Services Layer
====================================

Business logic between routes (HTTP) and the database.

Service Inventory:
    - UserService:             registration, lookups, username presence check
    - TourService:             tour CRUD, creator resolution, cascade delete
    - PointOfInterestService:  point CRUD with the two-path partial update
    - MediaStore:              flat-file photo/audio/video storage

Services are stateless singletons; the AsyncSession is passed into every
call so the route's transaction covers everything the call does.
"""
