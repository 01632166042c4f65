"""Application layer DI providers."""

from dishka import Scope, provide

from ledger.application.usecase.invitation import (
    BackfillInvitationUuidsUseCase,
    CreateInvitationUseCase,
    UpdateInvitationUseCase,
)
from ledger.config import IdentifierSettings
from ledger.domain.service import ClientInvitationService
from ledger.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    @provide(scope=Scope.REQUEST)
    def get_create_invitation_use_case(
        self, invitation_service: ClientInvitationService
    ) -> CreateInvitationUseCase:
        """Provide create invitation use case."""
        return CreateInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_update_invitation_use_case(
        self, invitation_service: ClientInvitationService
    ) -> UpdateInvitationUseCase:
        """Provide update invitation use case."""
        return UpdateInvitationUseCase(invitation_service=invitation_service)

    @provide(scope=Scope.REQUEST)
    def get_backfill_invitation_uuids_use_case(
        self,
        invitation_service: ClientInvitationService,
        identifier_settings: IdentifierSettings,
    ) -> BackfillInvitationUuidsUseCase:
        """Provide backfill invitation uuids use case."""
        return BackfillInvitationUuidsUseCase(
            invitation_service=invitation_service,
            identifier_settings=identifier_settings,
        )
