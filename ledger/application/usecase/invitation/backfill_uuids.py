"""Backfill invitation uuids use case."""

import logfire
from pydantic import BaseModel

from ledger.application.usecase.base import BaseUseCase
from ledger.config import IdentifierSettings
from ledger.domain.service import ClientInvitationService


class BackfillInvitationUuidsRequest(BaseModel):
    """Backfill request."""

    batch_size: int | None = None  # Defaults to the configured batch size


class BackfillInvitationUuidsResponse(BaseModel):
    """Backfill response."""

    backfilled: int
    batches: int


class BackfillInvitationUuidsUseCase(BaseUseCase):
    """Use case giving every legacy invitation a uuid.

    Runs batches until no invitation without a uuid remains. Once it reports
    zero, ``client_invitation`` can be added to
    IDENTIFIERS__BACKFILLED_ENTITIES so every record must carry a uuid.
    """

    def __init__(
        self,
        invitation_service: ClientInvitationService,
        identifier_settings: IdentifierSettings,
    ) -> None:
        self.invitation_service = invitation_service
        self.identifier_settings = identifier_settings

    async def execute(
        self, request: BackfillInvitationUuidsRequest
    ) -> BackfillInvitationUuidsResponse:
        batch_size = request.batch_size or self.identifier_settings.backfill_batch_size
        with logfire.span("backfill_invitation_uuids.execute", batch_size=batch_size):
            total = 0
            batches = 0
            while True:
                count = await self.invitation_service.backfill_uuids(batch_size)
                if count == 0:
                    break
                total += count
                batches += 1

            logfire.info(
                "Invitation uuid backfill finished", backfilled=total, batches=batches
            )
            return BackfillInvitationUuidsResponse(backfilled=total, batches=batches)
