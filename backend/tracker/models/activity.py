"""Activity ORM — a comment or event on an issue, authored by a Member.

Invariants:
    - Author is a Member (not a User); display name resolved Member -> User
    - ReplyTo is a weak parent back-reference, resolved by lookup only
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import Text, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from tracker.db.base import Base


class Activity(Base):
    """Threaded activity entry on an issue."""
    __tablename__ = "Activity"

    id: Mapped[uuid.UUID] = mapped_column(
        "ActivityId", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    description: Mapped[str] = mapped_column("ActivityDesc", Text, nullable=False)
    reply_to: Mapped[uuid.UUID | None] = mapped_column(
        "ReplyTo", UUID(as_uuid=True),
        ForeignKey("Activity.ActivityId", ondelete="SET NULL"),
        nullable=True,
    )
    member_id: Mapped[uuid.UUID] = mapped_column(
        "MemberId", UUID(as_uuid=True), ForeignKey("Member.MemberId"),
        nullable=False,
    )
    activity_time: Mapped[datetime] = mapped_column(
        "ActivityTime", DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    issue_id: Mapped[uuid.UUID] = mapped_column(
        "IssueId", UUID(as_uuid=True),
        ForeignKey("Issue.IssueId", ondelete="CASCADE"),
        nullable=False, index=True,
    )
