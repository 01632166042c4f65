"""Update invitation use case."""

import logfire
from pydantic import BaseModel

from ledger.application.usecase.base import BaseUseCase
from ledger.application.usecase.invitation.create_invitation import (
    InvitationResponse,
)
from ledger.domain.service import ClientInvitationService
from ledger.domain.value import AccountingFirmId, ClientInvitationId


class UpdateInvitationRequest(BaseModel):
    """Update invitation request.

    Only fields explicitly set on the request are changed. The uuid is not
    updatable.
    """

    invitation_id: ClientInvitationId
    updated_by: str | None = None
    accounting_firm_id: AccountingFirmId | None = None
    name: str | None = None
    invited_by_user_id: str | None = None
    client_email: str | None = None
    invitation_type: str | None = None
    invitation_trigger: str | None = None


class UpdateInvitationUseCase(BaseUseCase):
    """Use case for changing an existing client invitation."""

    def __init__(self, invitation_service: ClientInvitationService) -> None:
        """Initialize update invitation use case.

        Args:
            invitation_service: Client invitation domain service
        """
        self.invitation_service = invitation_service

    async def execute(self, request: UpdateInvitationRequest) -> InvitationResponse:
        """Apply changes to an invitation and persist them if still valid.

        Args:
            request: Invitation ID and the fields to change

        Returns:
            Response with the invitation's identifiers, or its errors

        Raises:
            NotFoundError: If the invitation does not exist
        """
        with logfire.span(
            "update_invitation.execute", invitation_id=str(request.invitation_id)
        ):
            invitation = await self.invitation_service.get_by_id(
                request.invitation_id
            )
            changes = request.model_dump(
                exclude_unset=True, exclude={"invitation_id", "updated_by"}
            )
            result = await self.invitation_service.save(
                invitation.model_copy(update=changes),
                whodunnit=request.updated_by,
            )

            if not result.valid:
                return InvitationResponse(
                    valid=False,
                    id=invitation.id,
                    uuid=invitation.uuid,
                    errors=result.errors,
                )

            return InvitationResponse(
                valid=True,
                id=result.invitation.id,
                uuid=result.invitation.uuid,
            )
