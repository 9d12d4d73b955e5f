"""DatabaseSessionManager — SQLAlchemy error mapping and rollback."""

import pytest
from sqlalchemy import text

from tracker.core.errors import DatabaseError
from tracker.infrastructure.database import DatabaseSessionManager


@pytest.fixture
async def manager(tmp_path):
    mgr = DatabaseSessionManager(f"sqlite+aiosqlite:///{tmp_path / 'tracker.db'}")
    yield mgr
    await mgr.dispose()


async def test_operational_error_becomes_database_error(manager):
    with pytest.raises(DatabaseError) as exc_info:
        async with manager.session() as db:
            await db.execute(text("SELECT * FROM no_such_table"))

    assert exc_info.value.http_status == 503
    assert exc_info.value.code == "DATABASE_ERROR"


async def test_non_database_errors_pass_through(manager):
    with pytest.raises(KeyError):
        async with manager.session():
            raise KeyError("boom")
