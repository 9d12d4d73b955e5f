"""Membership Authorization — scoping join and MemberScope capability.

Tests cover:
    - authorized_projects_for lists exactly the caller's memberships
    - resolve_member_scope returns None for non-members and unknown projects
    - scope_to_member filters a plain select down to the caller's projects
"""

from uuid import uuid4

from sqlalchemy import select

from tracker.core.domain_types import CallerIdentity
from tracker.models.project import Project
from tracker.services.membership import (
    authorized_projects_for, resolve_member_scope, scope_to_member,
)

ALICE = CallerIdentity("alice@x.com")
BOB = CallerIdentity("bob@x.com")


async def test_authorized_projects_iff_membership(test_db, seed):
    alice = await seed.user("alice@x.com")
    bob = await seed.user("bob@x.com")
    apollo, _ = await seed.owned_project(alice, "Apollo")
    gemini, _ = await seed.owned_project(bob, "Gemini")
    await seed.member(alice, gemini, role="Guest")
    await seed.owned_project(bob, "Mercury")

    assert await authorized_projects_for(test_db, ALICE) == {apollo.id, gemini.id}


async def test_authorized_projects_empty_for_unknown_caller(test_db):
    assert await authorized_projects_for(test_db, CallerIdentity("nobody@x.com")) == set()


async def test_member_scope_carries_membership(test_db, seed):
    alice = await seed.user("alice@x.com")
    apollo, member = await seed.owned_project(alice, "Apollo")

    scope = await resolve_member_scope(test_db, ALICE, apollo.id)

    assert scope is not None
    assert scope.user_id == alice.id
    assert scope.member_id == member.id
    assert scope.project_id == apollo.id
    assert scope.role == "Admin"


async def test_member_scope_none_for_non_member(test_db, seed):
    alice = await seed.user("alice@x.com")
    await seed.user("bob@x.com")
    apollo, _ = await seed.owned_project(alice, "Apollo")

    assert await resolve_member_scope(test_db, BOB, apollo.id) is None


async def test_member_scope_none_for_unknown_project(test_db, seed):
    await seed.user("alice@x.com")
    assert await resolve_member_scope(test_db, ALICE, uuid4()) is None


async def test_scope_to_member_restricts_to_project(test_db, seed):
    alice = await seed.user("alice@x.com")
    apollo, _ = await seed.owned_project(alice, "Apollo")
    await seed.owned_project(alice, "Gemini")

    query = scope_to_member(select(Project.name), ALICE, apollo.id)
    names = (await test_db.execute(query)).scalars().all()

    assert names == ["Apollo"]
