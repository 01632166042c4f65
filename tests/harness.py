"""Test harness for unit and integration tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import asyncio

from asyncpg.exceptions import PostgresError
import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import create_async_engine

from ledger.config import Settings
from ledger.util.di import Component
from tests.di import build_test_container


def skip_unless_postgres() -> None:
    """Skip the calling tests unless the configured database is migrated.

    Run ``scripts/run_migrations.py`` against DATABASE__URL first.
    """

    async def _check() -> None:
        engine = create_async_engine(
            Settings().database_url, connect_args={"timeout": 3}
        )
        try:
            async with engine.connect() as connection:
                await connection.execute(
                    text("SELECT uuid FROM client_invitations LIMIT 0")
                )
        finally:
            await engine.dispose()

    try:
        asyncio.run(_check())
    except (OSError, PostgresError, SQLAlchemyError) as e:
        pytest.skip(f"PostgreSQL not available: {e}")


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for service access
    - Assumes database services already running when persistence is unmocked

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_save_invitation(unit_env):
            service = await unit_env.get(ClientInvitationService)
            result = await service.save(invitation)
            assert result.valid
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        # Open request-scoped context
        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
