"""Universally unique identifier capability for persisted entities.

Entities compose ``HasUuid`` to gain a ``uuid`` attribute that is assigned
lazily, right before the entity is validated and again right before it is
saved. Callers (in practice the domain services) invoke ``with_uuid`` at both
points; nothing fires implicitly.

Whether a missing ``uuid`` is tolerated depends on the entity's backfill
phase. Until legacy rows of an entity type have been retrofitted, ``None`` is
accepted; afterwards every record must carry one.
"""

from typing import ClassVar, Self
from uuid import uuid4

from pydantic import BaseModel, ConfigDict

from ledger.domain.validation import BLANK, ValidationErrors, is_blank


class HasUuid(BaseModel):
    """Mixin adding a lazily generated, immutable ``uuid``."""

    model_config = ConfigDict(frozen=True)

    # Key under which the entity's backfill flag is configured
    uuid_entity: ClassVar[str]

    uuid: str | None = None

    @staticmethod
    def new_uuid() -> str:
        """Generate a random canonical UUID string."""
        return str(uuid4())

    def with_uuid(self) -> Self:
        """Return this entity with a uuid, generating one only if absent."""
        if not is_blank(self.uuid):
            return self
        return self.model_copy(update={"uuid": self.new_uuid()})

    def uuid_presence_errors(self, backfilled: bool) -> ValidationErrors:
        """Check uuid presence according to the backfill phase.

        Args:
            backfilled: Whether legacy records of this entity type already
                carry uuids

        Returns:
            Errors recorded against ``uuid``, empty when present
        """
        errors = ValidationErrors()
        if backfilled:
            if is_blank(self.uuid):
                errors.add("uuid", BLANK)
        elif self.uuid is not None and is_blank(self.uuid):
            errors.add("uuid", BLANK)
        return errors
