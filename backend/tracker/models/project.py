"""Project ORM — top-level tenant boundary; owns milestones, links and issues.

Invariants:
    - Never exists without at least one Member (created in the same transaction
      as the creator's Admin membership, see services/project_mutation.py)

Design Decisions:
    - Status is free text: workflows differ per team
"""

import uuid
from datetime import date

from sqlalchemy import String, Text, Date
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from tracker.db.base import Base


class Project(Base):
    """Project aggregate root."""
    __tablename__ = "Project"

    id: Mapped[uuid.UUID] = mapped_column(
        "ProjectId", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column("ProjectName", String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(
        "ProjectDescription", Text, nullable=True,
    )
    status: Mapped[str | None] = mapped_column(
        "ProjectStatus", String(50), nullable=True,
    )
    target: Mapped[date | None] = mapped_column("ProjectTarget", Date, nullable=True)
    start: Mapped[date | None] = mapped_column("ProjectStart", Date, nullable=True)

    members: Mapped[list["Member"]] = relationship(
        "Member", back_populates="project", lazy="raise",
    )
