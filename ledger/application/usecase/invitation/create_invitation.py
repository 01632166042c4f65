"""Create invitation use case."""

import logfire
from pydantic import BaseModel

from ledger.application.usecase.base import BaseUseCase
from ledger.domain.model import ClientInvitation
from ledger.domain.service import ClientInvitationService
from ledger.domain.value import AccountingFirmId, ClientInvitationId


class CreateInvitationRequest(BaseModel):
    """Create invitation request.

    Every field is optional here; missing values are reported as validation
    errors rather than rejected up front.
    """

    accounting_firm_id: AccountingFirmId | None = None
    name: str | None = None
    invited_by_user_id: str | None = None
    client_email: str | None = None
    invitation_type: str | None = None
    invitation_trigger: str | None = None
    uuid: str | None = None  # Externally supplied identifier, e.g. from an import


class InvitationResponse(BaseModel):
    """Outcome of creating or updating an invitation."""

    valid: bool
    id: ClientInvitationId | None = None
    uuid: str | None = None
    errors: dict[str, list[str]] = {}


class CreateInvitationUseCase(BaseUseCase):
    """Use case for creating a client invitation."""

    def __init__(self, invitation_service: ClientInvitationService) -> None:
        """Initialize create invitation use case.

        Args:
            invitation_service: Client invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: CreateInvitationRequest) -> InvitationResponse:
        """Validate and persist a new invitation.

        Args:
            request: Invitation attributes

        Returns:
            Response with the new invitation's identifiers, or its errors
        """
        with logfire.span(
            "create_invitation.execute",
            accounting_firm_id=str(request.accounting_firm_id),
            invited_by_user_id=request.invited_by_user_id,
        ):
            invitation = ClientInvitation(**request.model_dump())
            result = await self.invitation_service.save(
                invitation, whodunnit=request.invited_by_user_id
            )

            if not result.valid:
                return InvitationResponse(valid=False, errors=result.errors)

            return InvitationResponse(
                valid=True,
                id=result.invitation.id,
                uuid=result.invitation.uuid,
            )
