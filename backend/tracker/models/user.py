"""User ORM — internal record for a verified external identity.

Invariants:
    - Email is unique: concurrent first contact cannot produce two rows
    - Created lazily on first authenticated request; never deleted here

Design Decisions:
    - Quoted CamelCase column names ("UserId", "Email"): the storage schema is shared
      with existing clients and reports, so attribute names map onto it explicitly
"""

import uuid

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from tracker.db.base import Base


class User(Base):
    """Internal user keyed by verified email."""
    __tablename__ = "User"

    id: Mapped[uuid.UUID] = mapped_column(
        "UserId", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        "Email", String(320), nullable=False, unique=True,
    )
    user_name: Mapped[str | None] = mapped_column(
        "UserName", String(255), nullable=True,
    )

    memberships: Mapped[list["Member"]] = relationship(
        "Member", back_populates="user", lazy="raise",
    )
