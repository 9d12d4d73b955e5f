"""Caller Identity Dependency — builds the explicit CallerIdentity for each request.

Invariants:
    - The verified email comes only from the configured trusted header
    - Missing header -> UnauthenticatedError (401) before any project data is touched
    - The caller's User row exists once this dependency returns

Design Decisions:
    - Header set by the authenticating proxy: this service performs no independent
      verification and must not be exposed without that proxy in front of it
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from tracker.config import get_settings
from tracker.core.domain_types import CallerIdentity
from tracker.core.errors import UnauthenticatedError
from tracker.infrastructure.database import get_db
from tracker.services.identity_resolver import resolve_user


async def get_caller(
    request: Request, db: AsyncSession = Depends(get_db),
) -> CallerIdentity:
    """Resolve the verified caller and provision their User on first contact."""
    settings = get_settings()
    email = request.headers.get(settings.identity_email_header)
    if not email:
        raise UnauthenticatedError()
    caller = CallerIdentity(
        email=email,
        display_name=request.headers.get(settings.identity_name_header),
    )
    await resolve_user(db, caller)
    return caller
