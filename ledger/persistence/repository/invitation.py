"""PostgreSQL implementation of ClientInvitation repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.domain.model import ClientInvitation
from ledger.domain.repository import ClientInvitationRepository
from ledger.domain.value import AccountingFirmId, ClientInvitationId
from ledger.persistence.mappers import invitation_to_dict, row_to_invitation
from ledger.persistence.tables import client_invitations_table


class PostgresClientInvitationRepository(ClientInvitationRepository):
    """PostgreSQL implementation of ClientInvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(
        self, invitation_id: ClientInvitationId
    ) -> Optional[ClientInvitation]:
        """Find an invitation by storage ID.

        Args:
            invitation_id: Invitation ID to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(client_invitations_table).where(
            client_invitations_table.c.id == invitation_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_uuid(self, uuid: str) -> Optional[ClientInvitation]:
        """Find an invitation by uuid.

        Plain equality on a varchar column, so the match is case-sensitive.
        """
        stmt = select(client_invitations_table).where(
            client_invitations_table.c.uuid == uuid
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def exists_with_uuid(
        self, uuid: str, exclude_id: Optional[ClientInvitationId] = None
    ) -> bool:
        """Check if another invitation already holds this uuid."""
        stmt = select(client_invitations_table.c.id).where(
            client_invitations_table.c.uuid == uuid
        )
        if exclude_id is not None:
            stmt = stmt.where(client_invitations_table.c.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        return result.first() is not None

    async def save(self, invitation: ClientInvitation) -> ClientInvitation:
        """Save an invitation (create or update).

        Args:
            invitation: Invitation to save

        Returns:
            Saved invitation

        Raises:
            IntegrityError: If the uuid unique constraint is violated
        """
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)
        if existing:
            stmt = (
                update(client_invitations_table)
                .where(client_invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(client_invitations_table).values(**invitation_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return invitation

    async def delete(self, invitation_id: ClientInvitationId) -> bool:
        """Delete an invitation."""
        stmt = delete(client_invitations_table).where(
            client_invitations_table.c.id == invitation_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def find_by_firm(
        self, firm_id: AccountingFirmId, limit: int = 50, offset: int = 0
    ) -> list[ClientInvitation]:
        """Find invitations of a firm with pagination, newest first."""
        stmt = (
            select(client_invitations_table)
            .where(client_invitations_table.c.accounting_firm_id == firm_id)
            .order_by(client_invitations_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def find_missing_uuid(self, limit: int = 100) -> list[ClientInvitation]:
        """Find legacy invitations without a uuid, oldest first."""
        stmt = (
            select(client_invitations_table)
            .where(client_invitations_table.c.uuid.is_(None))
            .order_by(client_invitations_table.c.created_at)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]
