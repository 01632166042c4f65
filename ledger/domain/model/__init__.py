"""Domain model entities for ledger."""

from ledger.domain.model.firm import Accountant, AccountingFirm
from ledger.domain.model.has_uuid import HasUuid
from ledger.domain.model.invitation import ClientInvitation
from ledger.domain.model.version import InvitationVersion

__all__ = [
    "AccountingFirm",
    "Accountant",
    "ClientInvitation",
    "HasUuid",
    "InvitationVersion",
]
