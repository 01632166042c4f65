"""Client invitation entity.

An invitation is extended by an accounting firm to a client or a team member.
Records may be built in an invalid state; rules are evaluated explicitly and
report every violation instead of failing on the first one.
"""

from datetime import datetime
from typing import ClassVar
from uuid import uuid4

from email_validator import EmailNotValidError, validate_email
from pydantic import Field

from ledger.domain.model.common import DomainModel
from ledger.domain.model.has_uuid import HasUuid
from ledger.domain.validation import (
    BLANK,
    INVALID,
    NOT_INCLUDED,
    ValidationErrors,
    is_blank,
    too_long,
)
from ledger.domain.value import (
    AccountingFirmId,
    ClientInvitationId,
    InvitationTrigger,
    InvitationType,
)

CLIENT_EMAIL_MAX_LENGTH = 255


def _new_invitation_id() -> ClientInvitationId:
    return ClientInvitationId(uuid4())


class ClientInvitation(DomainModel, HasUuid):
    """Invitation of a client or team member by an accounting firm.

    Business rules checked here (the rest need storage and live in
    ClientInvitationService):
    - name and invited_by_user_id are required
    - client_email, when given, is a valid address of at most 255 characters
    - invitation_type, when given, is one of the InvitationType values
    """

    uuid_entity: ClassVar[str] = "client_invitation"

    id: ClientInvitationId = Field(default_factory=_new_invitation_id)
    accounting_firm_id: AccountingFirmId | None = None
    name: str | None = None
    invited_by_user_id: str | None = None
    client_email: str | None = None
    invitation_type: str | None = None  # Serialized InvitationType value
    invitation_trigger: str | None = None  # Serialized InvitationTrigger value
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def parsed_type(self) -> InvitationType | None:
        """Invitation type as an enum member, None when blank or unknown."""
        if self.invitation_type in InvitationType.serialized_values():
            return InvitationType(self.invitation_type)
        return None

    @property
    def parsed_trigger(self) -> InvitationTrigger | None:
        """Invitation trigger as an enum member, None when blank or unknown."""
        if self.invitation_trigger in InvitationTrigger.serialized_values():
            return InvitationTrigger(self.invitation_trigger)
        return None

    def field_errors(self) -> ValidationErrors:
        """Evaluate the rules that only look at this record's own fields."""
        errors = ValidationErrors()

        if is_blank(self.name):
            errors.add("name", BLANK)
        if is_blank(self.invited_by_user_id):
            errors.add("invited_by_user_id", BLANK)

        if not is_blank(self.client_email):
            if not _is_valid_email(self.client_email):
                errors.add("client_email", INVALID)
            if len(self.client_email) > CLIENT_EMAIL_MAX_LENGTH:
                errors.add("client_email", too_long(CLIENT_EMAIL_MAX_LENGTH))

        if not is_blank(self.invitation_type):
            if self.invitation_type not in InvitationType.serialized_values():
                errors.add("invitation_type", NOT_INCLUDED)

        return errors


def _is_valid_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        # Overall length is left to CLIENT_EMAIL_MAX_LENGTH; email-validator
        # checks it last, so nothing else has failed when it is raised.
        return _is_overall_length_error(e)
    return True


def _is_overall_length_error(error: EmailNotValidError) -> bool:
    message = str(error)
    return message.startswith("The email address is too long") and not (
        message.startswith("The email address is too long before the @-sign")
        or message.startswith("The email address is too long after the @-sign")
    )
