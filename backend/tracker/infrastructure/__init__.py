"""Infrastructure Layer — database session management and observability.

Invariants:
    - Infrastructure never imports from core/ domain logic other than errors
"""
