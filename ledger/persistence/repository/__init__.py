"""PostgreSQL repository implementations."""

from ledger.persistence.repository.firm import PostgresAccountingFirmRepository
from ledger.persistence.repository.invitation import (
    PostgresClientInvitationRepository,
)
from ledger.persistence.repository.version import (
    PostgresInvitationVersionRepository,
)

__all__ = [
    "PostgresAccountingFirmRepository",
    "PostgresClientInvitationRepository",
    "PostgresInvitationVersionRepository",
]
