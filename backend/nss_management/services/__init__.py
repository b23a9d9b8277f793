# Services package init
"""
NSS Management Backend: Services Layer
========================================

What:  Business logic between routes (HTTP) and the database.

Service Inventory:
    - resources.py:      ResourceType descriptors (Volunteer, Event, Activity)
    - record_store.py:   RecordStore, SQLAlchemy operations for one record type
    - validation.py:     coercion, defaults, required and unique rules
    - record_service.py: RecordService, the generic CRUD handler, and its
                         three instances
"""
