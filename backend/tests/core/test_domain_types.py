"""Domain Types — identity wrappers, role values, caller identity."""

from dataclasses import FrozenInstanceError
from uuid import uuid4

import pytest

from tracker.core.domain_types import (
    CallerIdentity, InviteId, InviteOutcome, MemberId, MemberRole, ProjectId, UserId,
)


def test_identity_types_wrap_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
    assert ProjectId(uid) == uid
    assert MemberId(uid) == uid
    assert InviteId(uid) == uid


def test_structural_roles():
    assert MemberRole.ADMIN.value == "Admin"
    assert MemberRole.GUEST.value == "Guest"


def test_invite_outcomes():
    assert {o.value for o in InviteOutcome} == {
        "accepted", "already_member", "not_for_you",
    }


def test_caller_user_name_defaults_to_local_part():
    assert CallerIdentity("alice@x.com").user_name == "alice"


def test_caller_user_name_prefers_display_name():
    assert CallerIdentity("alice@x.com", "Alice Liddell").user_name == "Alice Liddell"


def test_caller_identity_is_immutable():
    caller = CallerIdentity("alice@x.com")
    with pytest.raises(FrozenInstanceError):
        caller.email = "mallory@x.com"
