"""Invite Rules — pure decisions for the invite lifecycle.

Invariants:
    - Email match is exact: no case folding, no whitespace trimming
    - An invite is claimable once; a claimed or expired invite is never claimable
    - Every rejection reason maps to the same caller-visible outcome (NOT_FOR_YOU);
      the reason exists only for server-side logs

Design Decisions:
    - Pure functions over an InviteSnapshot: the shell loads the row, the core decides
      (ADR: impureim sandwich)
    - Naive datetimes are read as UTC: some drivers drop tzinfo on the way back
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from enum import Enum


class ClaimRejection(str, Enum):
    """Why an invite could not be claimed. Never sent to the caller."""
    MISSING = "missing"
    EMAIL_MISMATCH = "email_mismatch"
    ALREADY_CLAIMED = "already_claimed"
    EXPIRED = "expired"


@dataclass(frozen=True)
class InviteSnapshot:
    """The invite fields that decide claimability."""
    invited_email: str
    expires_at: datetime
    claimed_at: datetime | None = None


def invite_expiry(issued_at: datetime, ttl_hours: int) -> datetime:
    """Expiry timestamp for an invite issued at issued_at."""
    return as_utc(issued_at) + timedelta(hours=ttl_hours)


def check_invite_claim(
    invite: InviteSnapshot | None, caller_email: str, now: datetime,
) -> ClaimRejection | None:
    """Return None when caller_email may claim the invite, else the reason it may not."""
    if invite is None:
        return ClaimRejection.MISSING
    if invite.invited_email != caller_email:
        return ClaimRejection.EMAIL_MISMATCH
    if invite.claimed_at is not None:
        return ClaimRejection.ALREADY_CLAIMED
    if as_utc(invite.expires_at) <= as_utc(now):
        return ClaimRejection.EXPIRED
    return None


def as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc)
