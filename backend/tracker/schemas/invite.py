"""Invite Schemas — request/response models for issuing invites.

Invariants:
    - inviteeEmail is kept verbatim (no strip, no lowercasing): consumption compares
      it byte-for-byte with the consumer's verified email
    - invitedForRole defaults to "Guest"

Design Decisions:
    - Minimal email shape check (one "@", no whitespace) over full RFC validation:
      the identity provider is the authority on what an email is
"""

from uuid import UUID

from pydantic import BaseModel, Field

from tracker.core.domain_types import MemberRole


class InviteCreate(BaseModel):
    """Invite body for POST /project/{id}/addmember."""
    inviteeEmail: str = Field(
        min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$",
    )
    invitedForRole: str = Field(MemberRole.GUEST.value, min_length=1, max_length=50)


class InviteIssued(BaseModel):
    """Response for a freshly issued invite."""
    success: str = "Invite sent"
    InvitesId: UUID
