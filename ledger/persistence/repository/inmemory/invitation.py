"""In-memory client invitation repository for testing."""

from datetime import datetime
from typing import Optional

from sqlalchemy.exc import IntegrityError

from ledger.domain.model import ClientInvitation
from ledger.domain.repository import ClientInvitationRepository
from ledger.domain.value import AccountingFirmId, ClientInvitationId


class InMemoryClientInvitationRepository(ClientInvitationRepository):
    """In-memory implementation of ClientInvitationRepository for testing."""

    def __init__(self) -> None:
        self._invitations: list[ClientInvitation] = []

    async def find_by_id(
        self, invitation_id: ClientInvitationId
    ) -> Optional[ClientInvitation]:
        """Find an invitation by storage ID."""
        for invitation in self._invitations:
            if invitation.id == invitation_id:
                return invitation
        return None

    async def find_by_uuid(self, uuid: str) -> Optional[ClientInvitation]:
        """Find an invitation by uuid (case-sensitive)."""
        for invitation in self._invitations:
            if invitation.uuid == uuid:
                return invitation
        return None

    async def exists_with_uuid(
        self, uuid: str, exclude_id: Optional[ClientInvitationId] = None
    ) -> bool:
        """Check if another invitation already holds this uuid."""
        for invitation in self._invitations:
            if invitation.uuid == uuid and invitation.id != exclude_id:
                return True
        return False

    async def save(self, invitation: ClientInvitation) -> ClientInvitation:
        """Save an invitation (create or update).

        Raises:
            IntegrityError: If another invitation already holds the same uuid
        """
        # Mirror the unique constraint on uuid
        if invitation.uuid is not None and await self.exists_with_uuid(
            invitation.uuid, exclude_id=invitation.id
        ):
            raise IntegrityError("Duplicate invitation uuid", None, Exception())

        # Check for existing invitation with same ID (update case)
        for i, existing in enumerate(self._invitations):
            if existing.id == invitation.id:
                self._invitations[i] = invitation
                return invitation

        self._invitations.append(invitation)
        return invitation

    async def delete(self, invitation_id: ClientInvitationId) -> bool:
        """Delete an invitation."""
        for i, existing in enumerate(self._invitations):
            if existing.id == invitation_id:
                del self._invitations[i]
                return True
        return False

    async def find_by_firm(
        self, firm_id: AccountingFirmId, limit: int = 50, offset: int = 0
    ) -> list[ClientInvitation]:
        """Find invitations of a firm with pagination."""
        matches = [
            inv for inv in self._invitations if inv.accounting_firm_id == firm_id
        ]

        # Sort by created_at descending
        matches.sort(key=lambda inv: inv.created_at or datetime.min, reverse=True)

        # Apply pagination
        return matches[offset : offset + limit]

    async def find_missing_uuid(self, limit: int = 100) -> list[ClientInvitation]:
        """Find legacy invitations without a uuid."""
        return [inv for inv in self._invitations if inv.uuid is None][:limit]
