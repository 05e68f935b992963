"""API Layer — FastAPI routes, dependency providers and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return structured JSON responses

Design Decisions:
    - Thin routes delegate to services; no business rule lives in a route
"""
