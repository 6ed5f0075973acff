"""API Layer — FastAPI routes, middleware and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All responses are JSON, including 404 and 500

Design Decisions:
    - Thin routes delegate to services (controllers hold no business logic)
"""
