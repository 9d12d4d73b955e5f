"""Milestone ORM — a dated target inside one project."""

import uuid
from datetime import date

from sqlalchemy import String, Date, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from tracker.db.base import Base


class Milestone(Base):
    __tablename__ = "Milestone"

    id: Mapped[uuid.UUID] = mapped_column(
        "MilestoneId", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column("MilestoneName", String(255), nullable=False)
    target: Mapped[date | None] = mapped_column("MilestoneTarget", Date, nullable=True)
    project_id: Mapped[uuid.UUID] = mapped_column(
        "ProjectId", UUID(as_uuid=True),
        ForeignKey("Project.ProjectId", ondelete="CASCADE"),
        nullable=False, index=True,
    )
