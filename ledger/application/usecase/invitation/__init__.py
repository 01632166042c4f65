"""Invitation use cases."""

from ledger.application.usecase.invitation.backfill_uuids import (
    BackfillInvitationUuidsRequest,
    BackfillInvitationUuidsResponse,
    BackfillInvitationUuidsUseCase,
)
from ledger.application.usecase.invitation.create_invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
    InvitationResponse,
)
from ledger.application.usecase.invitation.update_invitation import (
    UpdateInvitationRequest,
    UpdateInvitationUseCase,
)

__all__ = [
    "BackfillInvitationUuidsRequest",
    "BackfillInvitationUuidsResponse",
    "BackfillInvitationUuidsUseCase",
    "CreateInvitationRequest",
    "CreateInvitationUseCase",
    "InvitationResponse",
    "UpdateInvitationRequest",
    "UpdateInvitationUseCase",
]
