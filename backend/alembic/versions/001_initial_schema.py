"""Initial schema — users, projects, memberships, milestones, links, issues, activity, invites.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

Quoted CamelCase identifiers match the schema existing clients query directly.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "User",
        sa.Column("UserId", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("Email", sa.String(320), nullable=False, unique=True),
        sa.Column("UserName", sa.String(255), nullable=True),
    )

    op.create_table(
        "Project",
        sa.Column("ProjectId", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("ProjectName", sa.String(255), nullable=False),
        sa.Column("ProjectDescription", sa.Text, nullable=True),
        sa.Column("ProjectStatus", sa.String(50), nullable=True),
        sa.Column("ProjectTarget", sa.Date, nullable=True),
        sa.Column("ProjectStart", sa.Date, nullable=True),
    )

    op.create_table(
        "Member",
        sa.Column("MemberId", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("UserId", UUID(as_uuid=True), sa.ForeignKey("User.UserId"), nullable=False),
        sa.Column("ProjectId", UUID(as_uuid=True), sa.ForeignKey("Project.ProjectId", ondelete="CASCADE"), nullable=False),
        sa.Column("MemberRole", sa.String(50), nullable=False),
        sa.UniqueConstraint("UserId", "ProjectId", name="uq_member_user_project"),
    )
    op.create_index("ix_Member_ProjectId", "Member", ["ProjectId"])

    op.create_table(
        "Milestone",
        sa.Column("MilestoneId", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("MilestoneName", sa.String(255), nullable=False),
        sa.Column("MilestoneTarget", sa.Date, nullable=True),
        sa.Column("ProjectId", UUID(as_uuid=True), sa.ForeignKey("Project.ProjectId", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_Milestone_ProjectId", "Milestone", ["ProjectId"])

    op.create_table(
        "Link",
        sa.Column("LinkId", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("InfoLink", sa.Text, nullable=False),
        sa.Column("ProjectId", UUID(as_uuid=True), sa.ForeignKey("Project.ProjectId", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_Link_ProjectId", "Link", ["ProjectId"])

    op.create_table(
        "Issue",
        sa.Column("IssueId", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("IssueName", sa.String(255), nullable=False),
        sa.Column("IssueStatus", sa.String(50), nullable=True),
        sa.Column("IssueLabel", sa.String(50), nullable=True),
        sa.Column("MilestoneId", UUID(as_uuid=True), sa.ForeignKey("Milestone.MilestoneId", ondelete="SET NULL"), nullable=True),
        sa.Column("Assigned", sa.String(320), nullable=True),
        sa.Column("SubIssueOf", UUID(as_uuid=True), sa.ForeignKey("Issue.IssueId", ondelete="SET NULL"), nullable=True),
        sa.Column("ProjectId", UUID(as_uuid=True), sa.ForeignKey("Project.ProjectId", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_Issue_ProjectId", "Issue", ["ProjectId"])

    op.create_table(
        "Activity",
        sa.Column("ActivityId", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("ActivityDesc", sa.Text, nullable=False),
        sa.Column("ReplyTo", UUID(as_uuid=True), sa.ForeignKey("Activity.ActivityId", ondelete="SET NULL"), nullable=True),
        sa.Column("MemberId", UUID(as_uuid=True), sa.ForeignKey("Member.MemberId"), nullable=False),
        sa.Column("ActivityTime", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("IssueId", UUID(as_uuid=True), sa.ForeignKey("Issue.IssueId", ondelete="CASCADE"), nullable=False),
    )
    op.create_index("ix_Activity_IssueId", "Activity", ["IssueId"])

    op.create_table(
        "Invites",
        sa.Column("InvitesId", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()")),
        sa.Column("InvitedBy", UUID(as_uuid=True), sa.ForeignKey("Member.MemberId"), nullable=False),
        sa.Column("InvitedToProjectId", UUID(as_uuid=True), sa.ForeignKey("Project.ProjectId", ondelete="CASCADE"), nullable=False),
        sa.Column("InvitedEmail", sa.String(320), nullable=False),
        sa.Column("InvitedForRole", sa.String(50), nullable=False),
        sa.Column("InvitedAt", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("ExpiresAt", sa.DateTime(timezone=True), nullable=False),
        sa.Column("ClaimedAt", sa.DateTime(timezone=True), nullable=True),
        sa.Column("ClaimedBy", UUID(as_uuid=True), sa.ForeignKey("User.UserId"), nullable=True),
    )


def downgrade() -> None:
    op.drop_table("Invites")
    op.drop_table("Activity")
    op.drop_table("Issue")
    op.drop_table("Link")
    op.drop_table("Milestone")
    op.drop_table("Member")
    op.drop_table("Project")
    op.drop_table("User")
