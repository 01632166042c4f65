"""Test configuration and helpers."""

from uuid import uuid4

from ledger.domain.model import ClientInvitation
from ledger.domain.value import AccountingFirmId


def make_email(length: int) -> str:
    """Build a syntactically plausible email of exactly ``length`` characters.

    Args:
        length: Total length, at least 70

    Returns:
        Address with a 64 character local part and a multi-label domain
    """
    local = "a" * 64
    # Labels of at most 63 characters, ending in ".com"
    remaining = length - len(local) - 1 - len(".com")
    labels = []
    while remaining > 0:
        size = min(63, remaining)
        if remaining - size == 1:
            size -= 1  # avoid a trailing single dot
        labels.append("b" * size)
        remaining -= size + 1
    domain = ".".join(labels) + ".com"
    email = f"{local}@{domain}"
    assert len(email) == length, len(email)
    return email


def make_invitation(
    firm_id: AccountingFirmId | None = None, **overrides
) -> ClientInvitation:
    """Helper building an invitation that passes the field-level rules.

    Args:
        firm_id: Firm the invitation belongs to
        **overrides: Field values replacing the defaults

    Returns:
        ClientInvitation domain model
    """
    fields = {
        "accounting_firm_id": firm_id,
        "name": "Jordan Client",
        "invited_by_user_id": "user-42",
        "client_email": "jordan@clientco.com",
        "invitation_type": "email_invite",
        "invitation_trigger": "Immediate",
    }
    fields.update(overrides)
    return ClientInvitation(**fields)


def new_firm_id() -> AccountingFirmId:
    return AccountingFirmId(uuid4())
