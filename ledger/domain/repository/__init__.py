"""Repository interfaces for the ledger domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from ledger.domain.repository.firm import AccountingFirmRepository
from ledger.domain.repository.invitation import ClientInvitationRepository
from ledger.domain.repository.version import InvitationVersionRepository

__all__ = [
    "AccountingFirmRepository",
    "ClientInvitationRepository",
    "InvitationVersionRepository",
]
