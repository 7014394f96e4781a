from uuid import uuid4

import pytest

from gymhub.app.use_cases.tenants import InviteManagerCommand, InviteManagerUseCase
from gymhub.domain.entities import Invitation, Subaccount, UserAccount


@pytest.fixture
def owned_subaccount(mock_uow, context, roles, statuses):
    """A franchise of a gym the caller owns, with lookup rows in place"""
    account_id = uuid4()
    subaccount = Subaccount(id=uuid4(), account_id=account_id, name="Downtown")

    mock_uow.subaccounts.get_by_id.return_value = subaccount
    mock_uow.user_accounts.get_owned_by_user.return_value = [
        UserAccount(user_id=context.user_id, account_id=account_id, is_owner=True)
    ]
    mock_uow.roles.get_by_name.side_effect = lambda name: roles.get(name)
    mock_uow.statuses.get_by_name.side_effect = lambda name: statuses.get(name)
    return subaccount


@pytest.mark.asyncio
async def test_owner_invites_manager(mock_uow, context, owned_subaccount, roles, statuses):
    command = InviteManagerCommand(
        email="A@X.com", subaccount_id=owned_subaccount.id, message="Welcome!"
    )

    result = await InviteManagerUseCase(mock_uow).execute(context, command)

    assert result.is_ok()
    response = result.value
    assert response.email == "a@x.com"
    assert response.role == "MANAGER"
    assert response.subaccount.name == "Downtown"
    assert len(response.token) == 26
    assert response.invite_link.endswith(f"/select-gym?token={response.token}")
    assert (response.expires_at - response.invited_at).days == 7
    assert response.message == "Welcome!"

    created = mock_uow.invitations.create.call_args.args[0]
    assert created.status_id == statuses["pending"].id
    assert created.role_id == roles["MANAGER"].id
    assert created.invited_by == context.user_id
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_trainer_role_is_accepted_case_insensitively(
    mock_uow, context, owned_subaccount
):
    command = InviteManagerCommand(
        email="t@x.com", subaccount_id=owned_subaccount.id, role="trainer"
    )

    result = await InviteManagerUseCase(mock_uow).execute(context, command)

    assert result.is_ok()
    assert result.value.role == "TRAINER"


@pytest.mark.asyncio
async def test_duplicate_pending_invitation_is_rejected(
    mock_uow, context, owned_subaccount
):
    mock_uow.invitations.get_pending_by_subaccount_and_email.return_value = Invitation(
        subaccount_id=owned_subaccount.id,
        email="a@x.com",
        role_id=uuid4(),
        status_id=uuid4(),
        token="existing",
    )
    command = InviteManagerCommand(email="a@x.com", subaccount_id=owned_subaccount.id)

    result = await InviteManagerUseCase(mock_uow).execute(context, command)

    assert result.is_err()
    assert result.error.code == "INVITATION_ALREADY_PENDING"
    assert (
        result.error.message
        == "An invitation is already pending for this email and franchise"
    )
    mock_uow.invitations.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_token_collision_generates_new_token(mock_uow, context, owned_subaccount):
    existing = Invitation(
        subaccount_id=uuid4(), email="b@x.com", role_id=uuid4(), status_id=uuid4(), token="t"
    )
    mock_uow.invitations.get_by_token.side_effect = [existing, None]
    command = InviteManagerCommand(email="a@x.com", subaccount_id=owned_subaccount.id)

    result = await InviteManagerUseCase(mock_uow).execute(context, command)

    assert result.is_ok()
    assert mock_uow.invitations.get_by_token.call_count == 2


@pytest.mark.asyncio
async def test_unknown_subaccount(mock_uow, context):
    command = InviteManagerCommand(email="a@x.com", subaccount_id=uuid4())

    result = await InviteManagerUseCase(mock_uow).execute(context, command)

    assert result.is_err()
    assert result.error.code == "SUBACCOUNT_NOT_FOUND"


@pytest.mark.asyncio
async def test_non_owner_cannot_invite(mock_uow, context, owned_subaccount):
    mock_uow.user_accounts.get_owned_by_user.return_value = [
        UserAccount(user_id=context.user_id, account_id=uuid4(), is_owner=True)
    ]
    command = InviteManagerCommand(email="a@x.com", subaccount_id=owned_subaccount.id)

    result = await InviteManagerUseCase(mock_uow).execute(context, command)

    assert result.is_err()
    assert result.error.code == "NOT_AN_OWNER"
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("role", ["OWNER", "STAFF", "janitor"])
async def test_only_assignable_roles(mock_uow, context, owned_subaccount, role):
    command = InviteManagerCommand(
        email="a@x.com", subaccount_id=owned_subaccount.id, role=role
    )

    result = await InviteManagerUseCase(mock_uow).execute(context, command)

    assert result.is_err()
    assert result.error.code == "INVALID_ROLE"


@pytest.mark.asyncio
async def test_missing_pending_status(mock_uow, context, owned_subaccount):
    mock_uow.statuses.get_by_name.side_effect = None
    mock_uow.statuses.get_by_name.return_value = None
    command = InviteManagerCommand(email="a@x.com", subaccount_id=owned_subaccount.id)

    result = await InviteManagerUseCase(mock_uow).execute(context, command)

    assert result.is_err()
    assert result.error.code == "STATUS_NOT_FOUND"
