"""In-memory repository implementations for testing."""

from .firm import InMemoryAccountingFirmRepository
from .invitation import InMemoryClientInvitationRepository
from .version import InMemoryInvitationVersionRepository

__all__ = [
    "InMemoryAccountingFirmRepository",
    "InMemoryClientInvitationRepository",
    "InMemoryInvitationVersionRepository",
]
