"""In-memory invitation version repository for testing."""

from ledger.domain.model import InvitationVersion
from ledger.domain.repository import InvitationVersionRepository
from ledger.domain.value import ClientInvitationId


class InMemoryInvitationVersionRepository(InvitationVersionRepository):
    """In-memory implementation of InvitationVersionRepository for testing."""

    def __init__(self) -> None:
        self._versions: list[InvitationVersion] = []

    async def save(self, version: InvitationVersion) -> InvitationVersion:
        """Append a version entry."""
        self._versions.append(version)
        return version

    async def find_by_item(
        self, item_id: ClientInvitationId
    ) -> list[InvitationVersion]:
        """Find all entries for an invitation, in insertion order."""
        return [v for v in self._versions if v.item_id == item_id]
