"""Change history entry for client invitations."""

from datetime import datetime
from typing import Any

from pydantic import Field

from ledger.domain.model.common import DomainModel
from ledger.domain.value import (
    ClientInvitationId,
    InvitationVersionId,
    VersionEvent,
)


class InvitationVersion(DomainModel):
    """One recorded change to an invitation.

    ``snapshot`` holds the invitation as it was before the change, so a
    ``create`` entry has none.
    """

    id: InvitationVersionId
    item_id: ClientInvitationId
    event: VersionEvent
    whodunnit: str | None = None
    snapshot: dict[str, Any] | None = None
    created_at: datetime = Field(default_factory=datetime.now)
