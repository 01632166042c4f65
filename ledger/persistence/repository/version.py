"""PostgreSQL implementation of InvitationVersion repository."""

from sqlalchemy import insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.domain.model import InvitationVersion
from ledger.domain.repository import InvitationVersionRepository
from ledger.domain.value import ClientInvitationId
from ledger.persistence.mappers import row_to_version, version_to_dict
from ledger.persistence.tables import client_invitation_versions_table


class PostgresInvitationVersionRepository(InvitationVersionRepository):
    """PostgreSQL implementation of InvitationVersionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def save(self, version: InvitationVersion) -> InvitationVersion:
        """Append a version entry."""
        stmt = insert(client_invitation_versions_table).values(
            **version_to_dict(version)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return version

    async def find_by_item(
        self, item_id: ClientInvitationId
    ) -> list[InvitationVersion]:
        """Find all entries for an invitation, oldest first."""
        stmt = (
            select(client_invitation_versions_table)
            .where(client_invitation_versions_table.c.item_id == item_id)
            .order_by(client_invitation_versions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_version(dict(row)) for row in result.mappings().all()]
