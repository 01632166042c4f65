"""Unit tests for settings."""

from ledger.config import IdentifierSettings, Settings


class TestIdentifierSettings:
    def test_nothing_backfilled_by_default(self):
        settings = IdentifierSettings()

        assert settings.is_backfilled("client_invitation") is False

    def test_backfilled_entities_from_environment(self, monkeypatch):
        monkeypatch.setenv(
            "IDENTIFIERS__BACKFILLED_ENTITIES", '["client_invitation"]'
        )
        monkeypatch.setenv("IDENTIFIERS__BACKFILL_BATCH_SIZE", "50")

        settings = Settings(_env_file=None)

        assert settings.identifiers.is_backfilled("client_invitation") is True
        assert settings.identifiers.is_backfilled("accountant") is False
        assert settings.identifiers.backfill_batch_size == 50

    def test_database_url(self, monkeypatch):
        monkeypatch.setenv("DATABASE__URL", "postgresql+asyncpg://u:p@db:5432/x")

        settings = Settings(_env_file=None)

        assert settings.database_url == "postgresql+asyncpg://u:p@db:5432/x"
