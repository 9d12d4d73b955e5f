"""Membership Authorization — scopes every project query to the caller's memberships.

Invariants:
    - Every project-scoped read is built through scope_to_member(): the authorization
      join lives in the same statement as the data it guards
    - A non-member observes an empty result, indistinguishable from a missing project
    - MemberScope is only constructed from a membership row that exists at lookup time
    - Nothing is cached across calls: membership is re-derived per query

Design Decisions:
    - Join pattern User -> Member -> Project filtered by Email: one round-trip per read,
      no separate "is member?" probe that could race with the read
    - Writes that need the caller's MemberId take a MemberScope capability instead of
      a raw project id (ADR: make the unscoped write unrepresentable)
"""

import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.domain_types import (
    CallerIdentity, MemberId, ProjectId, UserId,
)
from tracker.models.member import Member
from tracker.models.project import Project
from tracker.models.user import User

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MemberScope:
    """Proof that a caller is a member of one project."""
    user_id: UserId
    member_id: MemberId
    project_id: ProjectId
    role: str


def scope_to_member(
    query: Select,
    caller: CallerIdentity,
    project_id: UUID | None = None,
) -> Select:
    """Join User -> Member -> Project and restrict to the caller (and project)."""
    scoped = (
        query.select_from(User)
        .join(Member, Member.user_id == User.id)
        .join(Project, Project.id == Member.project_id)
        .where(User.email == caller.email)
    )
    if project_id is not None:
        scoped = scoped.where(Project.id == project_id)
    return scoped


async def authorized_projects_for(
    db: AsyncSession, caller: CallerIdentity,
) -> set[ProjectId]:
    """Ids of every project the caller holds a membership in."""
    result = await db.execute(scope_to_member(select(Project.id), caller))
    return {ProjectId(pid) for pid in result.scalars()}


async def resolve_member_scope(
    db: AsyncSession, caller: CallerIdentity, project_id: UUID,
) -> MemberScope | None:
    """Return the caller's MemberScope for project_id, or None if not a member."""
    query = scope_to_member(
        select(User.id, Member.id, Member.role), caller, project_id,
    )
    row = (await db.execute(query)).first()
    if row is None:
        logger.info(
            "No membership for caller", extra={"project_id": project_id},
        )
        return None
    user_id, member_id, role = row
    return MemberScope(
        user_id=UserId(user_id),
        member_id=MemberId(member_id),
        project_id=ProjectId(project_id),
        role=role,
    )
