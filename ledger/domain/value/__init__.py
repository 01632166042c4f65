"""Domain value objects for the ledger domain."""

from ledger.domain.value.identifiers import (
    AccountantId,
    AccountingFirmId,
    ClientInvitationId,
    InvitationVersionId,
)
from ledger.domain.value.types import InvitationTrigger, InvitationType, VersionEvent

__all__ = [
    # Identifiers
    "AccountingFirmId",
    "AccountantId",
    "ClientInvitationId",
    "InvitationVersionId",
    # Types
    "InvitationType",
    "InvitationTrigger",
    "VersionEvent",
]
