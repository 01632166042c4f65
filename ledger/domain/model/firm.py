"""Accounting firm and accountant entities.

A firm owns client invitations and employs accountants. Accountant emails
matter to invitations: a client cannot be invited with the email of someone
who already works at the inviting firm.
"""

from datetime import datetime

from pydantic import Field

from ledger.domain.model.common import DomainModel
from ledger.domain.value import AccountantId, AccountingFirmId


class AccountingFirm(DomainModel):
    """Accounting firm entity."""

    id: AccountingFirmId
    name: str
    created_at: datetime = Field(default_factory=datetime.now)


class Accountant(DomainModel):
    """Member of an accounting firm."""

    id: AccountantId
    accounting_firm_id: AccountingFirmId
    email: str
    name: str | None = None
    created_at: datetime = Field(default_factory=datetime.now)
