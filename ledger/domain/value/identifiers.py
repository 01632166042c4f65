"""Strongly typed identifiers for ledger domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

# Storage keys, owned by the persistence layer
AccountingFirmId = NewType("AccountingFirmId", UUID)
AccountantId = NewType("AccountantId", UUID)
ClientInvitationId = NewType("ClientInvitationId", UUID)
InvitationVersionId = NewType("InvitationVersionId", UUID)
