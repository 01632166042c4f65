"""Domain services."""

from .base import Service
from .firm_service import FirmService
from .invitation_service import ClientInvitationService, SaveResult

__all__ = [
    "ClientInvitationService",
    "FirmService",
    "SaveResult",
    "Service",
]
