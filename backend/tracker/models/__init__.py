"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Project is the tenant boundary; Member is the authorization anchor

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs (ADR: standard SQLAlchemy pattern)
"""

from tracker.models.user import User  # noqa: F401
from tracker.models.project import Project  # noqa: F401
from tracker.models.member import Member  # noqa: F401
from tracker.models.milestone import Milestone  # noqa: F401
from tracker.models.link import Link  # noqa: F401
from tracker.models.issue import Issue  # noqa: F401
from tracker.models.activity import Activity  # noqa: F401
from tracker.models.invite import Invite  # noqa: F401
