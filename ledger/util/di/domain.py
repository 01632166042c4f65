"""Domain layer DI providers."""

from dishka import Scope, provide

from ledger.config import IdentifierSettings
from ledger.domain.repository import (
    AccountingFirmRepository,
    ClientInvitationRepository,
    InvitationVersionRepository,
)
from ledger.domain.service import ClientInvitationService, FirmService
from ledger.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_firm_service(self, firm_repository: AccountingFirmRepository) -> FirmService:
        """Provide firm domain service."""
        return FirmService(firm_repository=firm_repository)

    @provide
    def get_client_invitation_service(
        self,
        invitation_repository: ClientInvitationRepository,
        firm_service: FirmService,
        version_repository: InvitationVersionRepository,
        identifier_settings: IdentifierSettings,
    ) -> ClientInvitationService:
        """Provide client invitation domain service."""
        return ClientInvitationService(
            invitation_repository=invitation_repository,
            firm_service=firm_service,
            version_repository=version_repository,
            identifier_settings=identifier_settings,
        )
