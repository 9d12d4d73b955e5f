"""Root conftest — shared test configuration, async DB and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB sessions
    - Identity is supplied the way the proxy does it: the verified-email header

Design Decisions:
    - SQLite in-memory with StaticPool: one shared connection, so the schema created
      by create_all is visible to every session
    - Seeder writes rows directly (bypassing services) so read tests control the
      exact table contents
"""

import os

os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from tracker.db.base import Base  # noqa: E402
from tracker.infrastructure.database import get_db  # noqa: E402
from tracker.main import app  # noqa: E402
from tracker.models import (  # noqa: E402
    Activity, Issue, Link, Member, Milestone, Project, User,
)


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


class Seeder:
    """Inserts rows straight into the test database."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def _save(self, row):
        self.db.add(row)
        await self.db.commit()
        return row

    async def user(self, email: str, name: str | None = None) -> User:
        return await self._save(User(email=email, user_name=name or email.split("@")[0]))

    async def project(self, name: str, **fields) -> Project:
        return await self._save(Project(name=name, **fields))

    async def member(self, user: User, project: Project, role: str = "Admin") -> Member:
        return await self._save(
            Member(user_id=user.id, project_id=project.id, role=role),
        )

    async def owned_project(self, user: User, name: str) -> tuple[Project, Member]:
        project = await self.project(name)
        return project, await self.member(user, project)

    async def milestone(self, project: Project, name: str, **fields) -> Milestone:
        return await self._save(Milestone(name=name, project_id=project.id, **fields))

    async def link(self, project: Project, url: str) -> Link:
        return await self._save(Link(info_link=url, project_id=project.id))

    async def issue(self, project: Project, name: str, **fields) -> Issue:
        return await self._save(Issue(name=name, project_id=project.id, **fields))

    async def activity(
        self, issue: Issue, author: Member, text: str, **fields,
    ) -> Activity:
        return await self._save(
            Activity(description=text, issue_id=issue.id, member_id=author.id, **fields),
        )


@pytest.fixture
def seed(test_db):
    return Seeder(test_db)


@pytest.fixture
def as_user():
    """Build the headers the authenticating proxy sets for a verified email."""
    def _headers(email: str, name: str | None = None) -> dict:
        headers = {"X-Verified-Email": email}
        if name:
            headers["X-Verified-Name"] = name
        return headers
    return _headers
