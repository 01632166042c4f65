"""Tests for backfill invitation uuids use case."""

import pytest

from ledger.application.usecase.invitation import (
    BackfillInvitationUuidsRequest,
    BackfillInvitationUuidsUseCase,
)
from ledger.domain.repository import ClientInvitationRepository
from tests.conftest import make_invitation
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestBackfillInvitationUuidsUseCase:
    """Tests for BackfillInvitationUuidsUseCase."""

    @pytest.mark.asyncio
    async def test_backfills_all_batches(self, unit_env):
        # Arrange
        invitation_repo = await unit_env.get(ClientInvitationRepository)
        use_case = await unit_env.get(BackfillInvitationUuidsUseCase)
        legacy = [make_invitation(name=f"Legacy {i}") for i in range(5)]
        for invitation in legacy:
            await invitation_repo.save(invitation)
        await invitation_repo.save(make_invitation(uuid="already-set"))

        # Act
        response = await use_case.execute(BackfillInvitationUuidsRequest(batch_size=2))

        # Assert
        assert response.backfilled == 5
        assert response.batches == 3
        assert await invitation_repo.find_missing_uuid() == []
        uuids = set()
        for invitation in legacy:
            stored = await invitation_repo.find_by_id(invitation.id)
            uuids.add(stored.uuid)
        assert len(uuids) == 5
        assert (await invitation_repo.find_by_uuid("already-set")) is not None

    @pytest.mark.asyncio
    async def test_nothing_to_backfill(self, unit_env):
        use_case = await unit_env.get(BackfillInvitationUuidsUseCase)

        response = await use_case.execute(BackfillInvitationUuidsRequest())

        assert response.backfilled == 0
        assert response.batches == 0
