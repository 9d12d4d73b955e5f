"""Link ORM — an informational URL attached to a project."""

import uuid

from sqlalchemy import Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from tracker.db.base import Base


class Link(Base):
    __tablename__ = "Link"

    id: Mapped[uuid.UUID] = mapped_column(
        "LinkId", UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    info_link: Mapped[str] = mapped_column("InfoLink", Text, nullable=False)
    project_id: Mapped[uuid.UUID] = mapped_column(
        "ProjectId", UUID(as_uuid=True),
        ForeignKey("Project.ProjectId", ondelete="CASCADE"),
        nullable=False, index=True,
    )
