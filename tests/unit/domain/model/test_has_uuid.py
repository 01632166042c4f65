"""Unit tests for the HasUuid identifier capability."""

import re

from ledger.domain.model import ClientInvitation
from tests.conftest import make_invitation

CANONICAL_UUID = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


class TestWithUuid:
    """Tests for the pre-validation / pre-save uuid hook."""

    def test_assigns_canonical_uuid_when_absent(self):
        """A missing uuid is replaced by a random canonical UUID string."""
        invitation = make_invitation()
        assert invitation.uuid is None

        result = invitation.with_uuid()

        assert result.uuid is not None
        assert CANONICAL_UUID.match(result.uuid)

    def test_is_idempotent(self):
        """Running the hook twice keeps the first assigned uuid."""
        first = make_invitation().with_uuid()

        second = first.with_uuid()

        assert second.uuid == first.uuid
        assert second is first

    def test_keeps_externally_supplied_uuid(self):
        """A caller-supplied uuid is never overwritten."""
        invitation = make_invitation(uuid="External-Import-0001")

        assert invitation.with_uuid().uuid == "External-Import-0001"

    def test_replaces_blank_uuid(self):
        """Blank counts as absent."""
        invitation = make_invitation(uuid="   ")

        result = invitation.with_uuid()

        assert CANONICAL_UUID.match(result.uuid)

    def test_does_not_mutate_original(self):
        """Models are immutable; the hook returns a copy."""
        invitation = make_invitation()

        invitation.with_uuid()

        assert invitation.uuid is None

    def test_generates_distinct_values(self):
        """Each generation draws a new random value."""
        uuids = {ClientInvitation.new_uuid() for _ in range(100)}
        assert len(uuids) == 100


class TestUuidPresenceErrors:
    """Tests for the backfill-dependent presence rule."""

    def test_backfilled_requires_uuid(self):
        """After backfill, a missing uuid is an error."""
        errors = make_invitation().uuid_presence_errors(backfilled=True)
        assert errors.on("uuid") == ["can't be blank"]

    def test_backfilled_rejects_blank_uuid(self):
        errors = make_invitation(uuid="").uuid_presence_errors(backfilled=True)
        assert errors.on("uuid") == ["can't be blank"]

    def test_backfilled_accepts_present_uuid(self):
        errors = make_invitation(uuid="abc").uuid_presence_errors(backfilled=True)
        assert not errors

    def test_not_backfilled_tolerates_missing_uuid(self):
        """Before backfill, legacy records may lack a uuid."""
        errors = make_invitation().uuid_presence_errors(backfilled=False)
        assert not errors

    def test_not_backfilled_rejects_blank_uuid(self):
        """Before backfill, a set-but-blank uuid is still an error."""
        errors = make_invitation(uuid=" ").uuid_presence_errors(backfilled=False)
        assert errors.on("uuid") == ["can't be blank"]
