"""Accounting firm repository interface."""

from abc import ABC, abstractmethod

from ledger.domain.model.firm import Accountant, AccountingFirm
from ledger.domain.value import AccountingFirmId


class AccountingFirmRepository(ABC):
    """Repository for AccountingFirm and its accountants.

    Defines the contract for firm persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, firm_id: AccountingFirmId) -> AccountingFirm | None:
        """Find a firm by ID.

        Args:
            firm_id: The firm's unique identifier

        Returns:
            The firm if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, firm: AccountingFirm) -> AccountingFirm:
        """Save a firm (create or update).

        Args:
            firm: The firm to save

        Returns:
            The saved firm
        """
        pass

    @abstractmethod
    async def find_accountants(self, firm_id: AccountingFirmId) -> list[Accountant]:
        """Find all accountants belonging to a firm.

        Args:
            firm_id: The firm's unique identifier

        Returns:
            Accountants of the firm, empty if none
        """
        pass

    @abstractmethod
    async def save_accountant(self, accountant: Accountant) -> Accountant:
        """Save an accountant (create or update).

        Args:
            accountant: The accountant to save

        Returns:
            The saved accountant
        """
        pass
