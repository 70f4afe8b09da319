"""Tests for DatabaseManager."""

import pytest
from sqlalchemy import inspect

from companykit.core.config import Settings
from companykit.infrastructure.persistence.database import DatabaseManager
from companykit.infrastructure.persistence.models import UserModel


@pytest.fixture
def manager(tmp_path):
    settings = Settings(
        _env_file=None, database_url=f"sqlite+aiosqlite:///{tmp_path}/companykit.db"
    )
    return DatabaseManager(settings)


@pytest.mark.asyncio
async def test_check_connection(manager):
    assert await manager.check_connection() is True
    await manager.disconnect()


@pytest.mark.asyncio
async def test_session_rolls_back_on_error(manager):
    await manager.create_tables()

    with pytest.raises(RuntimeError):
        async with manager.session() as session:
            session.add(UserModel(id="u-1", name="Taylor", email="taylor@example.com"))
            await session.flush()
            raise RuntimeError("boom")

    async with manager.session() as session:
        assert await session.get(UserModel, "u-1") is None

    await manager.disconnect()


@pytest.mark.asyncio
async def test_drop_tables_removes_schema(manager):
    await manager.create_tables()
    await manager.drop_tables()

    async with manager.engine.connect() as conn:
        tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())

    assert tables == []
    await manager.disconnect()
