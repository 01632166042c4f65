"""In-memory accounting firm repository for testing."""

from typing import Optional

from ledger.domain.model import Accountant, AccountingFirm
from ledger.domain.repository import AccountingFirmRepository
from ledger.domain.value import AccountingFirmId


class InMemoryAccountingFirmRepository(AccountingFirmRepository):
    """In-memory implementation of AccountingFirmRepository for testing."""

    def __init__(self) -> None:
        self._firms: dict[AccountingFirmId, AccountingFirm] = {}
        self._accountants: list[Accountant] = []

    async def find_by_id(self, firm_id: AccountingFirmId) -> Optional[AccountingFirm]:
        """Find a firm by ID."""
        return self._firms.get(firm_id)

    async def save(self, firm: AccountingFirm) -> AccountingFirm:
        """Save a firm (create or update)."""
        self._firms[firm.id] = firm
        return firm

    async def find_accountants(self, firm_id: AccountingFirmId) -> list[Accountant]:
        """Find all accountants belonging to a firm."""
        return [a for a in self._accountants if a.accounting_firm_id == firm_id]

    async def save_accountant(self, accountant: Accountant) -> Accountant:
        """Save an accountant (create or update)."""
        for i, existing in enumerate(self._accountants):
            if existing.id == accountant.id:
                self._accountants[i] = accountant
                return accountant
        self._accountants.append(accountant)
        return accountant
