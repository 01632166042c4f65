"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from ledger.domain.model import (
    Accountant,
    AccountingFirm,
    ClientInvitation,
    InvitationVersion,
)
from ledger.domain.validation import is_blank
from ledger.domain.value import (
    AccountantId,
    AccountingFirmId,
    ClientInvitationId,
    InvitationVersionId,
    VersionEvent,
)


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_firm(row: Dict[str, Any]) -> AccountingFirm:
    """Convert database row to AccountingFirm domain model."""
    return AccountingFirm(
        id=AccountingFirmId(_as_uuid(row["id"])),
        name=row["name"],
        created_at=row["created_at"],
    )


def firm_to_dict(firm: AccountingFirm) -> Dict[str, Any]:
    """Convert AccountingFirm domain model to database dict."""
    return firm.model_dump()


def row_to_accountant(row: Dict[str, Any]) -> Accountant:
    """Convert database row to Accountant domain model."""
    return Accountant(
        id=AccountantId(_as_uuid(row["id"])),
        accounting_firm_id=AccountingFirmId(_as_uuid(row["accounting_firm_id"])),
        email=row["email"],
        name=row.get("name"),
        created_at=row["created_at"],
    )


def accountant_to_dict(accountant: Accountant) -> Dict[str, Any]:
    """Convert Accountant domain model to database dict."""
    return accountant.model_dump()


def row_to_invitation(row: Dict[str, Any]) -> ClientInvitation:
    """Convert database row to ClientInvitation domain model.

    Args:
        row: Database row as dict

    Returns:
        ClientInvitation domain model
    """
    firm_id = row.get("accounting_firm_id")
    return ClientInvitation(
        id=ClientInvitationId(_as_uuid(row["id"])),
        uuid=row.get("uuid"),
        accounting_firm_id=AccountingFirmId(_as_uuid(firm_id)) if firm_id else None,
        name=row.get("name"),
        invited_by_user_id=row.get("invited_by_user_id"),
        client_email=row.get("client_email"),
        invitation_type=row.get("invitation_type"),
        invitation_trigger=row.get("invitation_trigger"),
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
    )


def invitation_to_dict(invitation: ClientInvitation) -> Dict[str, Any]:
    """Convert ClientInvitation domain model to database dict.

    Blank invitation types are stored as NULL since the column is an enum.
    """
    data = invitation.model_dump()
    if is_blank(data.get("invitation_type")):
        data["invitation_type"] = None
    # Let the database default timestamps that were never set
    for column in ("created_at", "updated_at"):
        if data[column] is None:
            del data[column]
    return data


def row_to_version(row: Dict[str, Any]) -> InvitationVersion:
    """Convert database row to InvitationVersion domain model."""
    return InvitationVersion(
        id=InvitationVersionId(_as_uuid(row["id"])),
        item_id=ClientInvitationId(_as_uuid(row["item_id"])),
        event=VersionEvent(row["event"]),
        whodunnit=row.get("whodunnit"),
        snapshot=row.get("snapshot"),
        created_at=row["created_at"],
    )


def version_to_dict(version: InvitationVersion) -> Dict[str, Any]:
    """Convert InvitationVersion domain model to database dict."""
    data = version.model_dump()
    data["event"] = version.event.value
    return data
