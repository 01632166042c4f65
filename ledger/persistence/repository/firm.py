"""PostgreSQL implementation of AccountingFirm repository."""

from typing import Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from ledger.domain.model import Accountant, AccountingFirm
from ledger.domain.repository import AccountingFirmRepository
from ledger.domain.value import AccountingFirmId
from ledger.persistence.mappers import (
    accountant_to_dict,
    firm_to_dict,
    row_to_accountant,
    row_to_firm,
)
from ledger.persistence.tables import accountants_table, accounting_firms_table


class PostgresAccountingFirmRepository(AccountingFirmRepository):
    """PostgreSQL implementation of AccountingFirmRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, firm_id: AccountingFirmId) -> Optional[AccountingFirm]:
        """Find a firm by ID."""
        stmt = select(accounting_firms_table).where(
            accounting_firms_table.c.id == firm_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_firm(dict(row)) if row else None

    async def save(self, firm: AccountingFirm) -> AccountingFirm:
        """Save a firm (create or update)."""
        firm_dict = firm_to_dict(firm)

        existing = await self.find_by_id(firm.id)
        if existing:
            stmt = (
                update(accounting_firms_table)
                .where(accounting_firms_table.c.id == firm.id)
                .values(**firm_dict)
            )
        else:
            stmt = insert(accounting_firms_table).values(**firm_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return firm

    async def find_accountants(self, firm_id: AccountingFirmId) -> list[Accountant]:
        """Find all accountants belonging to a firm."""
        stmt = (
            select(accountants_table)
            .where(accountants_table.c.accounting_firm_id == firm_id)
            .order_by(accountants_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_accountant(dict(row)) for row in result.mappings().all()]

    async def save_accountant(self, accountant: Accountant) -> Accountant:
        """Save an accountant (create or update)."""
        accountant_dict = accountant_to_dict(accountant)

        stmt = select(accountants_table.c.id).where(
            accountants_table.c.id == accountant.id
        )
        result = await self.session.execute(stmt)
        if result.first() is not None:
            stmt = (
                update(accountants_table)
                .where(accountants_table.c.id == accountant.id)
                .values(**accountant_dict)
            )
        else:
            stmt = insert(accountants_table).values(**accountant_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return accountant
