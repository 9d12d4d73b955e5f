"""Invite ORM — email-targeted, single-use, expiring offer of membership.

Invariants:
    - InvitedBy is the inviter's MemberId in InvitedToProjectId at issue time
    - ClaimedAt goes from NULL to a timestamp exactly once (conditional UPDATE)
    - An invite past ExpiresAt is never claimable

Design Decisions:
    - Table keeps its historical plural name "Invites"
    - ClaimedBy records the User who claimed it, for audit
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from tracker.db.base import Base


class Invite(Base):
    """Pending (or claimed) invitation into a project."""
    __tablename__ = "Invites"

    id: Mapped[uuid.UUID] = mapped_column(
        "InvitesId", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    invited_by: Mapped[uuid.UUID] = mapped_column(
        "InvitedBy", UUID(as_uuid=True), ForeignKey("Member.MemberId"),
        nullable=False,
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        "InvitedToProjectId", UUID(as_uuid=True),
        ForeignKey("Project.ProjectId", ondelete="CASCADE"),
        nullable=False,
    )
    invited_email: Mapped[str] = mapped_column(
        "InvitedEmail", String(320), nullable=False,
    )
    role: Mapped[str] = mapped_column("InvitedForRole", String(50), nullable=False)
    invited_at: Mapped[datetime] = mapped_column(
        "InvitedAt", DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    expires_at: Mapped[datetime] = mapped_column(
        "ExpiresAt", DateTime(timezone=True), nullable=False,
    )
    claimed_at: Mapped[datetime | None] = mapped_column(
        "ClaimedAt", DateTime(timezone=True), nullable=True,
    )
    claimed_by: Mapped[uuid.UUID | None] = mapped_column(
        "ClaimedBy", UUID(as_uuid=True), ForeignKey("User.UserId"),
        nullable=True,
    )
