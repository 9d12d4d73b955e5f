"""Invite Lifecycle — issues email-targeted invites and promotes them into memberships.

Invariants:
    - Only a current member can issue an invite (MemberScope required)
    - Consumption requires an exact InvitedEmail match (case-sensitive, no trimming)
    - Claim and membership insert share one transaction: the invite is claimed iff the
      caller ends up a member of the invited project
    - A claimed invite is never consumed again (conditional UPDATE on ClaimedAt IS NULL)
    - Missing / mismatched / claimed / expired invites all yield NOT_FOR_YOU; the
      reason is logged server-side only

Design Decisions:
    - Check-and-set via UPDATE ... WHERE ClaimedAt IS NULL instead of SELECT FOR UPDATE:
      correct under any isolation level, one statement, no lock wait
    - Existing membership is benign (ALREADY_MEMBER) and still claims the invite
    - A membership created concurrently (unique violation) rolls the claim back; the
      caller is a member either way
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.config import get_settings
from tracker.core.domain_types import (
    CallerIdentity, InviteId, InviteOutcome, MemberRole, ProjectId,
)
from tracker.core.errors import PreconditionFailedError
from tracker.core.invite_rules import (
    InviteSnapshot, check_invite_claim, invite_expiry,
)
from tracker.models.invite import Invite
from tracker.models.member import Member
from tracker.services.identity_resolver import resolve_user
from tracker.services.membership import MemberScope, resolve_member_scope

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InviteConsumption:
    """What happened when a caller followed an invite."""
    outcome: InviteOutcome
    project_id: ProjectId | None = None


# ─── Issue ──────────────────────────────────────────────────────

async def issue_invite(
    db: AsyncSession,
    caller: CallerIdentity,
    project_id: UUID,
    invitee_email: str,
    role: str = MemberRole.GUEST.value,
    *,
    ttl_hours: int | None = None,
) -> InviteId:
    """Invite invitee_email into project_id on behalf of the caller.

    ttl_hours defaults to the configured invite_ttl_hours.
    """
    scope = await resolve_member_scope(db, caller, project_id)
    if scope is None:
        raise PreconditionFailedError("issue invite")
    return await create_invite(
        db, scope, invitee_email, role, ttl_hours=ttl_hours,
    )


async def create_invite(
    db: AsyncSession,
    scope: MemberScope,
    invitee_email: str,
    role: str,
    *,
    ttl_hours: int | None = None,
) -> InviteId:
    if ttl_hours is None:
        ttl_hours = get_settings().invite_ttl_hours
    now = datetime.now(timezone.utc)
    invite = Invite(
        invited_by=scope.member_id,
        project_id=scope.project_id,
        invited_email=invitee_email,
        role=role,
        invited_at=now,
        expires_at=invite_expiry(now, ttl_hours),
    )
    db.add(invite)
    await db.commit()
    logger.info(
        "Invite issued",
        extra={"invite_id": invite.id, "project_id": scope.project_id},
    )
    return InviteId(invite.id)


# ─── Consume ────────────────────────────────────────────────────

async def consume_invite(
    db: AsyncSession,
    caller: CallerIdentity,
    invite_id: UUID,
    now: datetime | None = None,
) -> InviteConsumption:
    """Claim invite_id for the caller and make them a member of its project."""
    now = now or datetime.now(timezone.utc)
    user = await resolve_user(db, caller)

    invite = await db.get(Invite, invite_id, populate_existing=True)
    rejection = check_invite_claim(_snapshot(invite), caller.email, now)
    if rejection is not None:
        logger.info(
            f"Invite not claimable: {rejection.value}",
            extra={"invite_id": invite_id, "outcome": InviteOutcome.NOT_FOR_YOU.value},
        )
        return InviteConsumption(InviteOutcome.NOT_FOR_YOU)

    project_id = ProjectId(invite.project_id)
    try:
        claimed = await db.execute(
            update(Invite)
            .where(Invite.id == invite.id, Invite.claimed_at.is_(None))
            .values(claimed_at=now, claimed_by=user.id)
        )
        if claimed.rowcount != 1:
            await db.rollback()
            logger.info(
                "Invite claimed concurrently",
                extra={"invite_id": invite_id, "outcome": InviteOutcome.NOT_FOR_YOU.value},
            )
            return InviteConsumption(InviteOutcome.NOT_FOR_YOU)

        existing = await db.execute(
            select(Member.id).where(
                Member.user_id == user.id, Member.project_id == project_id,
            )
        )
        if existing.first() is not None:
            outcome = InviteOutcome.ALREADY_MEMBER
        else:
            db.add(Member(user_id=user.id, project_id=project_id, role=invite.role))
            await db.flush()
            outcome = InviteOutcome.ACCEPTED
        await db.commit()
    except IntegrityError:
        await db.rollback()
        outcome = InviteOutcome.ALREADY_MEMBER

    logger.info(
        "Invite consumed",
        extra={
            "invite_id": invite_id, "project_id": project_id,
            "outcome": outcome.value,
        },
    )
    return InviteConsumption(outcome, project_id)


def _snapshot(invite: Invite | None) -> InviteSnapshot | None:
    if invite is None:
        return None
    return InviteSnapshot(
        invited_email=invite.invited_email,
        expires_at=invite.expires_at,
        claimed_at=invite.claimed_at,
    )
