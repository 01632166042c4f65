"""Mock persistence providers for testing."""

from dishka import Scope, provide

from ledger.domain.repository import (
    AccountingFirmRepository,
    ClientInvitationRepository,
    InvitationVersionRepository,
)
from ledger.persistence.repository.inmemory import (
    InMemoryAccountingFirmRepository,
    InMemoryClientInvitationRepository,
    InMemoryInvitationVersionRepository,
)
from ledger.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_accounting_firm_repository(self) -> AccountingFirmRepository:
        """Provide in-memory accounting firm repository."""
        return InMemoryAccountingFirmRepository()

    @provide(scope=Scope.REQUEST)
    def get_client_invitation_repository(self) -> ClientInvitationRepository:
        """Provide in-memory client invitation repository."""
        return InMemoryClientInvitationRepository()

    @provide(scope=Scope.REQUEST)
    def get_invitation_version_repository(self) -> InvitationVersionRepository:
        """Provide in-memory invitation version repository."""
        return InMemoryInvitationVersionRepository()
