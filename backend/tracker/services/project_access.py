"""Project Access — membership-scoped reads over projects, milestones, links, issues, activity.

Invariants:
    - Every statement is built through scope_to_member(); no read bypasses the join
    - Results are flat row mappings keyed by storage column names (denormalized);
      no object graph is rebuilt
    - Overview uses LEFT JOINs: a member sees the project row even with no milestones/links
    - Issue detail INNER JOINs Activity: an issue without activity yields []

Design Decisions:
    - Overview multiplies milestones x links (one row per pair): clients already
      de-duplicate the denormalized shape
    - Author display name goes through aliased Member/User, never the caller's join
"""

import logging
from typing import Any
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from tracker.core.domain_types import CallerIdentity
from tracker.models.activity import Activity
from tracker.models.issue import Issue
from tracker.models.link import Link
from tracker.models.member import Member
from tracker.models.milestone import Milestone
from tracker.models.project import Project
from tracker.models.user import User
from tracker.services.membership import scope_to_member

logger = logging.getLogger(__name__)

Row = dict[str, Any]

_ISSUE_COLUMNS = (
    Issue.id.label("IssueId"),
    Issue.name.label("IssueName"),
    Issue.status.label("IssueStatus"),
    Issue.issue_label.label("IssueLabel"),
    Milestone.name.label("MilestoneName"),
    Milestone.id.label("MilestoneId"),
    Issue.assigned.label("Assigned"),
    Issue.sub_issue_of.label("SubIssueOf"),
)


class ProjectReader:
    """Scoped read operations for one caller."""

    def __init__(self, db: AsyncSession, caller: CallerIdentity):
        self.db = db
        self.caller = caller

    async def list_projects(self) -> list[Row]:
        """Names of every project the caller is a member of."""
        query = scope_to_member(
            select(Project.name.label("ProjectName")), self.caller,
        )
        return await self._rows(query)

    async def project_overview(self, project_id: UUID) -> list[Row]:
        """Project fields x milestones x links, or [] for a non-member."""
        query = scope_to_member(
            select(
                Project.id.label("ProjectId"),
                Project.name.label("ProjectName"),
                Project.description.label("ProjectDescription"),
                Project.status.label("ProjectStatus"),
                Project.target.label("ProjectTarget"),
                Project.start.label("ProjectStart"),
                Milestone.id.label("MilestoneId"),
                Milestone.name.label("MilestoneName"),
                Milestone.target.label("MilestoneTarget"),
                Link.id.label("LinkId"),
                Link.info_link.label("InfoLink"),
            ),
            self.caller, project_id,
        )
        query = (
            query.outerjoin(Milestone, Milestone.project_id == Project.id)
            .outerjoin(Link, Link.project_id == Project.id)
        )
        return await self._rows(query)

    async def list_issues(self, project_id: UUID) -> list[Row]:
        """Issues of the project, each with its milestone (nullable)."""
        query = scope_to_member(select(*_ISSUE_COLUMNS), self.caller, project_id)
        query = (
            query.join(Issue, Issue.project_id == Project.id)
            .outerjoin(Milestone, Milestone.id == Issue.milestone_id)
        )
        return await self._rows(query)

    async def issue_detail(self, project_id: UUID, issue_id: UUID) -> list[Row]:
        """One row per activity entry on the issue; [] when it has none."""
        author_member = aliased(Member)
        author = aliased(User)
        query = scope_to_member(
            select(
                *_ISSUE_COLUMNS,
                Activity.id.label("ActivityId"),
                Activity.description.label("ActivityDesc"),
                Activity.reply_to.label("ReplyTo"),
                Activity.member_id.label("MemberId"),
                Activity.activity_time.label("ActivityTime"),
                author.user_name.label("ActivityUserName"),
            ),
            self.caller, project_id,
        )
        query = (
            query.join(Issue, Issue.project_id == Project.id)
            .outerjoin(Milestone, Milestone.id == Issue.milestone_id)
            .join(Activity, Activity.issue_id == Issue.id)
            .join(author_member, author_member.id == Activity.member_id)
            .join(author, author.id == author_member.user_id)
            .where(Issue.id == issue_id)
        )
        return await self._rows(query)

    async def _rows(self, query: Select) -> list[Row]:
        result = await self.db.execute(query)
        return [dict(row) for row in result.mappings()]
