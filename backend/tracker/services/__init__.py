"""Services Layer — identity resolution, membership scoping, project access and invites.

Invariants:
    - Every function takes the caller identity explicitly (no ambient auth state)
    - Multi-statement writes commit exactly once, or roll back as a unit
"""
