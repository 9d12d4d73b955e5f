"""Project Mutation — creates a project together with its creator's Admin membership.

Invariants:
    - Project insert and Admin Member insert commit together or not at all
    - The caller must already have a User row (PreconditionFailedError otherwise)
    - No Project is ever visible without a Member

Design Decisions:
    - flush() after the project insert: the generated ProjectId is needed for the Member
      row, but nothing is committed until both rows are in the transaction
"""

import logging
from datetime import date
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.domain_types import CallerIdentity, MemberRole, ProjectId
from tracker.core.errors import PreconditionFailedError
from tracker.models.member import Member
from tracker.models.project import Project
from tracker.services.identity_resolver import find_user

logger = logging.getLogger(__name__)


def admin_membership(user_id: UUID, project_id: UUID) -> Member:
    return Member(
        user_id=user_id, project_id=project_id, role=MemberRole.ADMIN.value,
    )


async def create_project(
    db: AsyncSession,
    caller: CallerIdentity,
    name: str,
    *,
    description: str | None = None,
    status: str | None = None,
    target: date | None = None,
    start: date | None = None,
) -> ProjectId:
    """Create a project owned by the caller and return its id."""
    user = await find_user(db, caller.email)
    if user is None:
        raise PreconditionFailedError("create project")

    project = Project(
        name=name, description=description, status=status,
        target=target, start=start,
    )
    try:
        db.add(project)
        await db.flush()
        db.add(admin_membership(user.id, project.id))
        await db.flush()
        await db.commit()
    except Exception:
        await db.rollback()
        logger.error("Project creation rolled back", exc_info=True)
        raise

    logger.info("Project created", extra={"project_id": project.id})
    return ProjectId(project.id)
