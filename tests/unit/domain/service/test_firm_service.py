"""Unit tests for FirmService."""

from uuid import uuid4

import pytest

from ledger.domain.error import NotFoundError
from ledger.domain.service import FirmService
from ledger.domain.value import AccountingFirmId
from ledger.persistence.repository.inmemory import InMemoryAccountingFirmRepository


class TestFirmService:
    """Tests for firm and accountant management."""

    @pytest.mark.asyncio
    async def test_create_firm(self):
        service = FirmService(InMemoryAccountingFirmRepository())

        firm = await service.create_firm("Ledger & Co")

        assert firm.name == "Ledger & Co"
        assert await service.get_by_id(firm.id) == firm

    @pytest.mark.asyncio
    async def test_add_accountants(self):
        service = FirmService(InMemoryAccountingFirmRepository())
        firm = await service.create_firm("Ledger & Co")

        await service.add_accountant(firm.id, "a@x.com")
        await service.add_accountant(firm.id, "b@x.com", name="Blair")

        assert await service.accountant_emails(firm.id) == {"a@x.com", "b@x.com"}

    @pytest.mark.asyncio
    async def test_add_accountant_to_unknown_firm(self):
        service = FirmService(InMemoryAccountingFirmRepository())

        with pytest.raises(NotFoundError, match="AccountingFirm not found"):
            await service.add_accountant(AccountingFirmId(uuid4()), "a@x.com")

    @pytest.mark.asyncio
    async def test_firm_without_accountants(self):
        service = FirmService(InMemoryAccountingFirmRepository())
        firm = await service.create_firm("Solo Books")

        assert await service.accountant_emails(firm.id) == set()

    @pytest.mark.asyncio
    async def test_find_unknown_firm(self):
        service = FirmService(InMemoryAccountingFirmRepository())

        assert await service.find_by_id(AccountingFirmId(uuid4())) is None
        with pytest.raises(NotFoundError):
            await service.get_by_id(AccountingFirmId(uuid4()))
