"""Member ORM — join entity granting a User access to a Project with a role.

Invariants:
    - (UserId, ProjectId) is unique: a user holds at most one membership per project
    - MemberRole is an open string; "Admin" and "Guest" are the structural values
    - Membership existence is the only authorization check (no per-role permissions)

Design Decisions:
    - Every project-scoped query joins through this table (services/membership.py)
"""

import uuid

from sqlalchemy import String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from tracker.db.base import Base


class Member(Base):
    """Membership of one user in one project."""
    __tablename__ = "Member"
    __table_args__ = (
        UniqueConstraint("UserId", "ProjectId", name="uq_member_user_project"),
    )

    id: Mapped[uuid.UUID] = mapped_column(
        "MemberId", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        "UserId", UUID(as_uuid=True), ForeignKey("User.UserId"), nullable=False,
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        "ProjectId", UUID(as_uuid=True),
        ForeignKey("Project.ProjectId", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    role: Mapped[str] = mapped_column("MemberRole", String(50), nullable=False)

    user: Mapped["User"] = relationship("User", back_populates="memberships")
    project: Mapped["Project"] = relationship("Project", back_populates="members")
