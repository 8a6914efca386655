"""
Bills Demo Backend: API Routes Package
======================================

Route Inventory:
    - greeting.py: GET /           (plain-text greeting)
    - bills.py:    GET /api/bills  (fixed bill listing)
    - health.py:   GET /health     (process probe)

Routes stay thin: they call a service and return its result.
"""
