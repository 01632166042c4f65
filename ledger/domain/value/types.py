"""Closed value sets for the ledger domain.

Each enum member serializes to its literal string value. Validation of
stored values always compares against the serialized values, never the
member names.
"""

from enum import Enum


class InvitationType(str, Enum):
    """How an invitation reached the client."""

    UNKNOWN = "unknown"
    EMAIL_INVITE = "email_invite"
    IN_APP_ADD = "in_app_add"
    PROSPECT_EMAIL = "prospect_email"

    @classmethod
    def serialized_values(cls) -> frozenset[str]:
        """Return the set of serialized values."""
        return frozenset(member.value for member in cls)


class InvitationTrigger(str, Enum):
    """When the invitation is sent."""

    IMMEDIATE = "Immediate"
    ONBOARDED = "Onboarded"

    @classmethod
    def serialized_values(cls) -> frozenset[str]:
        """Return the set of serialized values."""
        return frozenset(member.value for member in cls)


class VersionEvent(str, Enum):
    """Kind of change captured in an invitation's history."""

    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"
