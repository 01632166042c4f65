"""Tests for update invitation use case."""

from uuid import uuid4

import pytest

from ledger.application.usecase.invitation import (
    CreateInvitationRequest,
    CreateInvitationUseCase,
    UpdateInvitationRequest,
    UpdateInvitationUseCase,
)
from ledger.domain.error import NotFoundError
from ledger.domain.service import ClientInvitationService, FirmService
from ledger.domain.value import ClientInvitationId, VersionEvent
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_invitation(unit_env):
    firm_service = await unit_env.get(FirmService)
    firm = await firm_service.create_firm("Ledger & Co")
    await firm_service.add_accountant(firm.id, "a@x.com")
    create = await unit_env.get(CreateInvitationUseCase)
    response = await create.execute(
        CreateInvitationRequest(
            accounting_firm_id=firm.id,
            name="Morgan Client",
            invited_by_user_id="user-1",
            client_email="morgan@clientco.com",
        )
    )
    assert response.valid
    return response


class TestUpdateInvitationUseCase:
    """Tests for UpdateInvitationUseCase."""

    @pytest.mark.asyncio
    async def test_update_changes_only_given_fields(self, unit_env):
        # Arrange
        created = await _create_invitation(unit_env)
        use_case = await unit_env.get(UpdateInvitationUseCase)
        invitation_service = await unit_env.get(ClientInvitationService)

        # Act
        response = await use_case.execute(
            UpdateInvitationRequest(
                invitation_id=created.id,
                updated_by="user-2",
                invitation_type="in_app_add",
            )
        )

        # Assert
        assert response.valid is True
        assert response.uuid == created.uuid

        stored = await invitation_service.get_by_id(created.id)
        assert stored.invitation_type == "in_app_add"
        assert stored.name == "Morgan Client"
        assert stored.client_email == "morgan@clientco.com"

        history = await invitation_service.history(created.id)
        assert [v.event for v in history] == [VersionEvent.CREATE, VersionEvent.UPDATE]
        assert history[1].whodunnit == "user-2"

    @pytest.mark.asyncio
    async def test_invalid_update_is_not_persisted(self, unit_env):
        created = await _create_invitation(unit_env)
        use_case = await unit_env.get(UpdateInvitationUseCase)
        invitation_service = await unit_env.get(ClientInvitationService)

        response = await use_case.execute(
            UpdateInvitationRequest(
                invitation_id=created.id, client_email="a@x.com", name=""
            )
        )

        assert response.valid is False
        assert response.uuid == created.uuid
        assert response.errors == {
            "name": ["can't be blank"],
            "client_email": ["Email of firm member cannot be used for client email"],
        }
        stored = await invitation_service.get_by_id(created.id)
        assert stored.name == "Morgan Client"

    @pytest.mark.asyncio
    async def test_clearing_optional_email(self, unit_env):
        """Explicitly setting a field to None clears it."""
        created = await _create_invitation(unit_env)
        use_case = await unit_env.get(UpdateInvitationUseCase)
        invitation_service = await unit_env.get(ClientInvitationService)

        response = await use_case.execute(
            UpdateInvitationRequest(invitation_id=created.id, client_email=None)
        )

        assert response.valid is True
        stored = await invitation_service.get_by_id(created.id)
        assert stored.client_email is None

    @pytest.mark.asyncio
    async def test_update_missing_invitation(self, unit_env):
        use_case = await unit_env.get(UpdateInvitationUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateInvitationRequest(invitation_id=ClientInvitationId(uuid4()))
            )
