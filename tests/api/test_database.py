import pytest

from src.api.core.database import Database


async def test_session_requires_connect():
    database = Database()

    assert database.is_connected is False
    with pytest.raises(RuntimeError):
        async with database.session():
            pass


async def test_disconnect_without_connect_is_noop():
    database = Database()

    await database.disconnect()

    assert database.engine is None
