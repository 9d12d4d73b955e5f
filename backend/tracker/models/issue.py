"""Issue ORM — unit of work inside a project.

Invariants:
    - Always belongs to one Project; optionally to one Milestone
    - SubIssueOf is a weak parent back-reference, resolved by lookup only

Design Decisions:
    - No relationship() for SubIssueOf: avoids unbounded-depth eager loading
"""

import uuid

from sqlalchemy import String, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from tracker.db.base import Base


class Issue(Base):
    """Issue within a project, optionally nested under a parent issue."""
    __tablename__ = "Issue"

    id: Mapped[uuid.UUID] = mapped_column(
        "IssueId", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column("IssueName", String(255), nullable=False)
    status: Mapped[str | None] = mapped_column("IssueStatus", String(50), nullable=True)
    issue_label: Mapped[str | None] = mapped_column("IssueLabel", String(50), nullable=True)
    milestone_id: Mapped[uuid.UUID | None] = mapped_column(
        "MilestoneId", UUID(as_uuid=True),
        ForeignKey("Milestone.MilestoneId", ondelete="SET NULL"),
        nullable=True,
    )
    assigned: Mapped[str | None] = mapped_column("Assigned", String(320), nullable=True)
    sub_issue_of: Mapped[uuid.UUID | None] = mapped_column(
        "SubIssueOf", UUID(as_uuid=True),
        ForeignKey("Issue.IssueId", ondelete="SET NULL"),
        nullable=True,
    )
    project_id: Mapped[uuid.UUID] = mapped_column(
        "ProjectId", UUID(as_uuid=True),
        ForeignKey("Project.ProjectId", ondelete="CASCADE"),
        nullable=False, index=True,
    )
