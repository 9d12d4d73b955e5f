"""Invite Routes — issue an invite, follow an invite link.

Invariants:
    - Following an invite never reveals whether it exists or whom it targets:
      every non-accepting outcome is the same redirect to /project/all
    - Accepted and already-member outcomes redirect to the project overview
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import RedirectResponse
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.api.identity import get_caller
from tracker.core.domain_types import CallerIdentity, InviteOutcome
from tracker.infrastructure.database import get_db
from tracker.schemas.invite import InviteCreate, InviteIssued
from tracker.services.invite_lifecycle import consume_invite, issue_invite

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/project", tags=["invites"])


@router.post("/{project_id}/addmember", response_model=InviteIssued)
async def add_member(
    project_id: UUID,
    body: InviteCreate,
    caller: CallerIdentity = Depends(get_caller),
    db: AsyncSession = Depends(get_db),
):
    """Issue an invite into the project; delivery of the link happens elsewhere."""
    invite_id = await issue_invite(
        db, caller, project_id, body.inviteeEmail, body.invitedForRole,
    )
    return InviteIssued(InvitesId=invite_id)


@router.get("/invite/{invite_id}")
async def accept_invite(
    invite_id: UUID,
    request: Request,
    caller: CallerIdentity = Depends(get_caller),
    db: AsyncSession = Depends(get_db),
):
    """Follow an invite link: join the project if the invite is for the caller."""
    result = await consume_invite(db, caller, invite_id)
    if result.outcome is InviteOutcome.NOT_FOR_YOU:
        target = request.url_for("list_projects")
    else:
        target = request.url_for(
            "get_project_overview", project_id=str(result.project_id),
        )
    return RedirectResponse(url=str(target), status_code=status.HTTP_302_FOUND)
