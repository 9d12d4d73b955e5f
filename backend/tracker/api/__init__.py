"""API Layer — FastAPI routes, identity dependency and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - Every route resolves the caller identity before touching project data

Design Decisions:
    - Thin routes delegate to services (ADR: impureim sandwich)
"""
