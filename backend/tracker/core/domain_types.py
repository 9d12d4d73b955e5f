"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ProjectId, MemberId, InviteId wrap UUIDs — never use bare UUID in domain logic
    - MemberRole values are the only roles referenced structurally; roles stay open strings
    - CallerIdentity is the only carrier of "who is asking" — passed explicitly, never global

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from dataclasses import dataclass
from enum import Enum
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
ProjectId = NewType("ProjectId", UUID)
MemberId = NewType("MemberId", UUID)
InviteId = NewType("InviteId", UUID)


# ─── Enums ───────────────────────────────────────────────────────

class MemberRole(str, Enum):
    """Roles with structural meaning. Any other string is a valid role too."""
    ADMIN = "Admin"   # project creator
    GUEST = "Guest"   # default invite role


class InviteOutcome(str, Enum):
    """Result of consuming an invite — none of these is an error."""
    ACCEPTED = "accepted"
    ALREADY_MEMBER = "already_member"
    NOT_FOR_YOU = "not_for_you"


# ─── Request Context ─────────────────────────────────────────────

@dataclass(frozen=True)
class CallerIdentity:
    """Verified caller, as supplied by the identity collaborator.

    email is kept byte-for-byte: invite matching is exact and case-sensitive.
    """
    email: str
    display_name: str | None = None

    @property
    def user_name(self) -> str:
        """Display name for a freshly provisioned User row."""
        if self.display_name:
            return self.display_name
        return self.email.split("@", 1)[0]
