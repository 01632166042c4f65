"""Client invitation repository interface."""

from abc import ABC, abstractmethod

from ledger.domain.model.invitation import ClientInvitation
from ledger.domain.value import AccountingFirmId, ClientInvitationId


class ClientInvitationRepository(ABC):
    """Repository for ClientInvitation entity.

    Defines the contract for invitation persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(
        self, invitation_id: ClientInvitationId
    ) -> ClientInvitation | None:
        """Find an invitation by storage ID.

        Args:
            invitation_id: The invitation's storage key

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_uuid(self, uuid: str) -> ClientInvitation | None:
        """Find an invitation by its uuid (case-sensitive).

        Args:
            uuid: The invitation's universally unique identifier

        Returns:
            The invitation if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists_with_uuid(
        self, uuid: str, exclude_id: ClientInvitationId | None = None
    ) -> bool:
        """Check whether another invitation already holds ``uuid``.

        Used by the uniqueness rule. Comparison is case-sensitive.

        Args:
            uuid: The uuid to look for
            exclude_id: Storage key of the record being validated, if persisted

        Returns:
            True if a different invitation has this uuid, False otherwise
        """
        pass

    @abstractmethod
    async def save(self, invitation: ClientInvitation) -> ClientInvitation:
        """Save an invitation (create or update).

        Args:
            invitation: The invitation to save

        Returns:
            The saved invitation

        Raises:
            IntegrityError: If another invitation already holds the same uuid
        """
        pass

    @abstractmethod
    async def delete(self, invitation_id: ClientInvitationId) -> bool:
        """Delete an invitation.

        Args:
            invitation_id: The invitation's storage key

        Returns:
            True if a record was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def find_by_firm(
        self, firm_id: AccountingFirmId, limit: int = 50, offset: int = 0
    ) -> list[ClientInvitation]:
        """Find invitations of a firm, newest first.

        Args:
            firm_id: The firm's unique identifier
            limit: Maximum number of results
            offset: Number of results to skip

        Returns:
            List of invitations
        """
        pass

    @abstractmethod
    async def find_missing_uuid(self, limit: int = 100) -> list[ClientInvitation]:
        """Find legacy invitations that have no uuid yet.

        Args:
            limit: Maximum number of results

        Returns:
            List of invitations whose uuid is null
        """
        pass
