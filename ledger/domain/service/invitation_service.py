"""Client invitation domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel, ConfigDict

from ledger.config import IdentifierSettings
from ledger.domain.error import NotFoundError, RecordInvalidError
from ledger.domain.model.firm import AccountingFirm
from ledger.domain.model.invitation import ClientInvitation
from ledger.domain.model.version import InvitationVersion
from ledger.domain.repository import (
    ClientInvitationRepository,
    InvitationVersionRepository,
)
from ledger.domain.validation import (
    BLANK,
    FIRM_MEMBER_EMAIL,
    TAKEN,
    ValidationErrors,
    ValidationResult,
)
from ledger.domain.value import (
    AccountingFirmId,
    ClientInvitationId,
    InvitationVersionId,
    VersionEvent,
)

from .base import Service
from .firm_service import FirmService


class SaveResult(BaseModel):
    """Outcome of saving an invitation.

    ``invitation`` is the persisted record when valid, otherwise the record
    as validated (with its uuid assigned) so callers can re-prompt.
    """

    model_config = ConfigDict(frozen=True)

    invitation: ClientInvitation
    errors: dict[str, list[str]] = {}

    @property
    def valid(self) -> bool:
        return not self.errors

    def raise_for_errors(self) -> ClientInvitation:
        """Return the saved invitation or raise if validation failed.

        Raises:
            RecordInvalidError: If the invitation was not saved
        """
        if self.errors:
            raise RecordInvalidError("ClientInvitation", self.errors)
        return self.invitation


class ClientInvitationService(Service):
    """Domain service for the client invitation lifecycle.

    Every validation and every save starts with the uuid hook, then runs all
    rules and collects every failure.
    """

    def __init__(
        self,
        invitation_repository: ClientInvitationRepository,
        firm_service: FirmService,
        version_repository: InvitationVersionRepository,
        identifier_settings: IdentifierSettings,
    ) -> None:
        """Initialize client invitation service.

        Args:
            invitation_repository: Client invitation repository
            firm_service: Firm domain service, for firm lookups and accountant emails
            version_repository: Invitation history repository
            identifier_settings: Identifier backfill configuration
        """
        self.invitation_repository = invitation_repository
        self.firm_service = firm_service
        self.version_repository = version_repository
        self.identifier_settings = identifier_settings

    @property
    def uuid_backfilled(self) -> bool:
        return self.identifier_settings.is_backfilled(ClientInvitation.uuid_entity)

    async def validate(
        self, invitation: ClientInvitation
    ) -> tuple[ClientInvitation, ValidationResult]:
        """Assign a uuid if absent, then run every validation rule.

        Args:
            invitation: Invitation to validate

        Returns:
            The invitation with its uuid assigned, and the verdict
        """
        with logfire.span(
            "invitation_service.validate", invitation_id=str(invitation.id)
        ):
            invitation = invitation.with_uuid()
            errors = await self._collect_errors(invitation)
            result = ValidationResult.from_errors(errors)
            if not result.valid:
                logfire.info(
                    "Invitation invalid",
                    invitation_id=str(invitation.id),
                    errors=result.errors,
                )
            return invitation, result

    async def save(
        self, invitation: ClientInvitation, whodunnit: str | None = None
    ) -> SaveResult:
        """Validate and persist an invitation, recording the change.

        Nothing is written when validation fails.

        Args:
            invitation: Invitation to create or update
            whodunnit: Who made the change, stored in the history

        Returns:
            Save result carrying the invitation and any errors

        Raises:
            IntegrityError: If the storage layer rejects a duplicate uuid
        """
        with logfire.span(
            "invitation_service.save",
            invitation_id=str(invitation.id),
            whodunnit=whodunnit,
        ):
            invitation, result = await self.validate(invitation)
            if not result.valid:
                return SaveResult(invitation=invitation, errors=result.errors)

            invitation = invitation.with_uuid()
            existing = await self.invitation_repository.find_by_id(invitation.id)
            now = datetime.now()
            created_at = existing.created_at if existing else invitation.created_at
            invitation = invitation.model_copy(
                update={"created_at": created_at or now, "updated_at": now}
            )

            saved = await self.invitation_repository.save(invitation)
            event = VersionEvent.UPDATE if existing else VersionEvent.CREATE
            await self._record_version(saved.id, event, whodunnit, existing)

            logfire.info(
                "Invitation saved",
                invitation_id=str(saved.id),
                uuid=saved.uuid,
                event=event.value,
            )
            return SaveResult(invitation=saved)

    async def delete(
        self, invitation_id: ClientInvitationId, whodunnit: str | None = None
    ) -> None:
        """Delete an invitation, recording the change.

        Raises:
            NotFoundError: If the invitation does not exist
        """
        with logfire.span(
            "invitation_service.delete", invitation_id=str(invitation_id)
        ):
            existing = await self.get_by_id(invitation_id)
            await self.invitation_repository.delete(invitation_id)
            await self._record_version(
                invitation_id, VersionEvent.DESTROY, whodunnit, existing
            )
            logfire.info("Invitation deleted", invitation_id=str(invitation_id))

    async def get_by_id(self, invitation_id: ClientInvitationId) -> ClientInvitation:
        """Get an invitation by storage ID.

        Raises:
            NotFoundError: If the invitation does not exist
        """
        invitation = await self.invitation_repository.find_by_id(invitation_id)
        if not invitation:
            raise NotFoundError("ClientInvitation", str(invitation_id))
        return invitation

    async def get_by_uuid(self, uuid: str) -> ClientInvitation | None:
        """Get an invitation by uuid, case-sensitive."""
        return await self.invitation_repository.find_by_uuid(uuid)

    async def list_for_firm(
        self, firm_id: AccountingFirmId, limit: int = 50, offset: int = 0
    ) -> list[ClientInvitation]:
        """List a firm's invitations, newest first."""
        with logfire.span(
            "invitation_service.list_for_firm",
            firm_id=str(firm_id),
            limit=limit,
            offset=offset,
        ):
            return await self.invitation_repository.find_by_firm(
                firm_id, limit, offset
            )

    async def history(
        self, invitation_id: ClientInvitationId
    ) -> list[InvitationVersion]:
        """Recorded changes of an invitation, oldest first."""
        return await self.version_repository.find_by_item(invitation_id)

    async def backfill_uuids(self, batch_size: int = 100) -> int:
        """Give a uuid to one batch of legacy invitations lacking one.

        Legacy rows are written as they are; validation and history are
        skipped since the records predate both.

        Args:
            batch_size: Maximum number of invitations to update

        Returns:
            Number of invitations updated
        """
        with logfire.span("invitation_service.backfill_uuids", batch_size=batch_size):
            legacy = await self.invitation_repository.find_missing_uuid(batch_size)
            for invitation in legacy:
                await self.invitation_repository.save(invitation.with_uuid())
            logfire.info("Invitation uuids backfilled", count=len(legacy))
            return len(legacy)

    async def _collect_errors(self, invitation: ClientInvitation) -> ValidationErrors:
        errors = ValidationErrors()
        errors.merge(invitation.uuid_presence_errors(self.uuid_backfilled))
        errors.merge(invitation.field_errors())

        firm = await self._find_firm(invitation.accounting_firm_id)
        if firm is None:
            errors.add("accounting_firm", BLANK)
        else:
            await self._check_non_firm_email(invitation, firm, errors)

        if invitation.uuid and await self.invitation_repository.exists_with_uuid(
            invitation.uuid, exclude_id=invitation.id
        ):
            errors.add("uuid", TAKEN)

        return errors

    async def _find_firm(
        self, firm_id: AccountingFirmId | None
    ) -> AccountingFirm | None:
        if firm_id is None:
            return None
        return await self.firm_service.find_by_id(firm_id)

    async def _check_non_firm_email(
        self,
        invitation: ClientInvitation,
        firm: AccountingFirm,
        errors: ValidationErrors,
    ) -> None:
        emails = await self.firm_service.accountant_emails(firm.id)
        if invitation.client_email in emails:
            errors.add("client_email", FIRM_MEMBER_EMAIL)

    async def _record_version(
        self,
        item_id: ClientInvitationId,
        event: VersionEvent,
        whodunnit: str | None,
        previous: ClientInvitation | None,
    ) -> None:
        version = InvitationVersion(
            id=InvitationVersionId(uuid4()),
            item_id=item_id,
            event=event,
            whodunnit=whodunnit,
            snapshot=previous.model_dump(mode="json") if previous else None,
        )
        await self.version_repository.save(version)
