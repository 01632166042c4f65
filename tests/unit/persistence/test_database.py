"""Unit tests for engine and session factory creation."""

from ledger.config import DatabaseSettings, Settings
from ledger.persistence.database import create_engine, create_session_factory


class TestDatabase:
    def test_engine_uses_database_settings(self):
        settings = Settings(
            _env_file=None,
            debug=True,
            database=DatabaseSettings(
                url="postgresql+asyncpg://u:p@db:5432/ledger",
                pool_size=3,
                max_overflow=1,
            ),
        )

        engine = create_engine(settings)

        assert engine.url.database == "ledger"
        assert engine.echo is True
        assert engine.pool.size() == 3
        engine.sync_engine.dispose()

    def test_sessions_do_not_autoflush_or_expire(self):
        engine = create_engine(Settings(_env_file=None))

        factory = create_session_factory(engine)

        assert factory.kw["autoflush"] is False
        assert factory.kw["expire_on_commit"] is False
        engine.sync_engine.dispose()
