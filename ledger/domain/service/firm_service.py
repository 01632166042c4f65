"""Accounting firm domain service."""

from uuid import uuid4

import logfire

from ledger.domain.error import NotFoundError
from ledger.domain.model.firm import Accountant, AccountingFirm
from ledger.domain.repository import AccountingFirmRepository
from ledger.domain.value import AccountantId, AccountingFirmId

from .base import Service


class FirmService(Service):
    """Domain service for accounting firms and their accountants."""

    def __init__(self, firm_repository: AccountingFirmRepository) -> None:
        """Initialize firm service.

        Args:
            firm_repository: Accounting firm repository
        """
        self.firm_repository = firm_repository

    async def create_firm(self, name: str) -> AccountingFirm:
        """Create a new accounting firm.

        Args:
            name: Firm display name

        Returns:
            Created firm
        """
        with logfire.span("firm_service.create_firm", firm_name=name):
            firm = AccountingFirm(id=AccountingFirmId(uuid4()), name=name)
            saved = await self.firm_repository.save(firm)
            logfire.info("Firm created", firm_id=str(saved.id))
            return saved

    async def find_by_id(self, firm_id: AccountingFirmId) -> AccountingFirm | None:
        """Find a firm by ID, None if it does not exist."""
        return await self.firm_repository.find_by_id(firm_id)

    async def get_by_id(self, firm_id: AccountingFirmId) -> AccountingFirm:
        """Get a firm by ID.

        Raises:
            NotFoundError: If the firm does not exist
        """
        firm = await self.find_by_id(firm_id)
        if not firm:
            raise NotFoundError("AccountingFirm", str(firm_id))
        return firm

    async def add_accountant(
        self, firm_id: AccountingFirmId, email: str, name: str | None = None
    ) -> Accountant:
        """Add an accountant to a firm.

        Args:
            firm_id: Firm the accountant works for
            email: Accountant email
            name: Optional display name

        Returns:
            Created accountant

        Raises:
            NotFoundError: If the firm does not exist
        """
        with logfire.span("firm_service.add_accountant", firm_id=str(firm_id)):
            await self.get_by_id(firm_id)
            accountant = Accountant(
                id=AccountantId(uuid4()),
                accounting_firm_id=firm_id,
                email=email,
                name=name,
            )
            saved = await self.firm_repository.save_accountant(accountant)
            logfire.info(
                "Accountant added",
                firm_id=str(firm_id),
                accountant_id=str(saved.id),
            )
            return saved

    async def accountant_emails(self, firm_id: AccountingFirmId) -> set[str]:
        """Emails of every accountant of a firm."""
        accountants = await self.firm_repository.find_accountants(firm_id)
        return {accountant.email for accountant in accountants}
