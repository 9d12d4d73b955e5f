"""Identity Resolver — lazy provisioning and race-safe first contact.

Tests cover:
    - First contact creates exactly one User
    - Known email returns the existing row without inserting
    - A unique-Email violation from a concurrent first contact is absorbed
"""

from sqlalchemy import func, select

from tracker.core.domain_types import CallerIdentity
from tracker.models.user import User
from tracker.services import identity_resolver
from tracker.services.identity_resolver import resolve_user


async def _user_count(db) -> int:
    return (await db.execute(select(func.count()).select_from(User))).scalar_one()


async def test_first_contact_creates_user(test_db):
    user = await resolve_user(test_db, CallerIdentity("alice@x.com", "Alice"))

    assert user.email == "alice@x.com"
    assert user.user_name == "Alice"
    assert await _user_count(test_db) == 1


async def test_known_email_returns_existing_user(test_db, seed):
    existing = await seed.user("alice@x.com")

    user = await resolve_user(test_db, CallerIdentity("alice@x.com"))

    assert user.id == existing.id
    assert await _user_count(test_db) == 1


async def test_lookup_is_exact(test_db, seed):
    await seed.user("alice@x.com")

    await resolve_user(test_db, CallerIdentity("Alice@x.com"))

    assert await _user_count(test_db) == 2


async def test_concurrent_first_contact_rereads_winner(test_db, seed, monkeypatch):
    """Simulate losing the race: the first lookup misses, the insert collides."""
    winner = await seed.user("alice@x.com")
    winner_id = winner.id
    real_find = identity_resolver.find_user
    calls = []

    async def racing_find(db, email):
        calls.append(email)
        if len(calls) == 1:
            return None
        return await real_find(db, email)

    monkeypatch.setattr(identity_resolver, "find_user", racing_find)

    user = await resolve_user(test_db, CallerIdentity("alice@x.com"))

    assert user.id == winner_id
    assert len(calls) == 2
    assert await _user_count(test_db) == 1
