"""Invitation version repository interface."""

from abc import ABC, abstractmethod

from ledger.domain.model.version import InvitationVersion
from ledger.domain.value import ClientInvitationId


class InvitationVersionRepository(ABC):
    """Repository for the change history of client invitations."""

    @abstractmethod
    async def save(self, version: InvitationVersion) -> InvitationVersion:
        """Append a version entry.

        Args:
            version: The entry to record

        Returns:
            The recorded entry
        """
        pass

    @abstractmethod
    async def find_by_item(
        self, item_id: ClientInvitationId
    ) -> list[InvitationVersion]:
        """Find all entries for an invitation, oldest first.

        Args:
            item_id: The invitation's storage key

        Returns:
            List of version entries
        """
        pass
