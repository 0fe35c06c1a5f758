"""
People API - API Routes Package
===============================

Route Inventory:
    - people.py:  GET/POST /api/people, GET/PUT/DELETE /api/people/{id}
    - health.py:  GET /health

Routes stay thin: build the request object, call the handler, set status
codes and headers. Anything else belongs in services/.
"""
