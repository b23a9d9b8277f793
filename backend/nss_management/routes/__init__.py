# Routes package init
"""
NSS Management Backend: API Routes Package
============================================

Route Inventory:
    - records.py: GET/POST        /api/{volunteers|events|activities}
                  GET/PUT/DELETE  /api/{volunteers|events|activities}/{id}
    - pages.py:   GET  /          (landing page, static index.html)
    - health.py:  GET  /health    (service health check)

Routes are THIN: they extract path and body, call a RecordService, and
return its result. Business rules live in the services package.
"""
