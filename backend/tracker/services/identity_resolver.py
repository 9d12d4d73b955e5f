"""Identity Resolver — maps a verified caller email to its internal User row.

Invariants:
    - Lookup is by exact Email (no normalization)
    - First contact creates the User; a concurrent first contact that wins the
      unique-Email race is treated as "already resolved" and looked up again
    - Never raises on a uniqueness violation

Design Decisions:
    - Commit immediately after provisioning: later units of work in the same request
      must see the User even if they roll back their own writes
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.core.domain_types import CallerIdentity
from tracker.models.user import User

logger = logging.getLogger(__name__)


async def find_user(db: AsyncSession, email: str) -> User | None:
    result = await db.execute(select(User).where(User.email == email))
    return result.scalar_one_or_none()


async def resolve_user(db: AsyncSession, caller: CallerIdentity) -> User:
    """Return the caller's User, creating it on first sight."""
    user = await find_user(db, caller.email)
    if user:
        return user

    user = User(email=caller.email, user_name=caller.user_name)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        logger.info("User provisioned concurrently, re-reading")
        user = await find_user(db, caller.email)
        if user is None:
            raise
        return user

    logger.info("Provisioned user on first contact")
    return user
