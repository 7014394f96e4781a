from uuid import uuid4

import pytest

from gymhub.app.use_cases.tenants import CompleteOnboardingCommand, CompleteOnboardingUseCase
from gymhub.domain.entities import Account, User, UserAccount


@pytest.fixture
def command():
    return CompleteOnboardingCommand(
        gym={"name": "Iron Temple", "address": "1 Main St", "phone": "555-0100"},
        owner={"name": "Sam Owner", "phone": "555-0101"},
        currency="eur",
    )


@pytest.fixture
def lookups(mock_uow, roles):
    mock_uow.roles.get_by_name.side_effect = lambda name: roles.get(name)
    mock_uow.roles.get_by_id.side_effect = lambda role_id: next(
        (r for r in roles.values() if r.id == role_id), None
    )
    mock_uow.subaccounts.get_by_id.side_effect = (
        lambda subaccount_id: mock_uow.subaccounts.create.call_args.args[0]
    )


@pytest.mark.asyncio
async def test_completes_placeholder_account(mock_uow, context, command, roles, lookups):
    placeholder = Account(id=uuid4(), name="Sam's Gym", email=context.email)
    link = UserAccount(
        user_id=context.user_id, account_id=placeholder.id, role_id=roles["OWNER"].id, is_owner=True
    )
    user = User(id=context.user_id, email=context.email, name="Sam")
    mock_uow.accounts.get_latest_incomplete_by_email.return_value = placeholder
    mock_uow.accounts.get_by_id.return_value = placeholder
    mock_uow.user_accounts.get_by_user_and_account.return_value = link
    mock_uow.users.get_by_id.return_value = user

    result = await CompleteOnboardingUseCase(mock_uow).execute(context, command)

    assert result.is_ok()
    response = result.value
    assert response.redirect_to == "/dashboard"
    assert response.gym.account.name == "Iron Temple"
    assert response.gym.subaccount.name == "Iron Temple Main"
    assert response.gym.subaccount.location == "1 Main St"
    assert response.gym.onboarding_completed is True

    assert placeholder.onboarding_completed is True
    assert placeholder.currency == "EUR"
    mock_uow.accounts.create.assert_not_called()

    subaccount = mock_uow.subaccounts.create.call_args.args[0]
    assert link.subaccount_id == subaccount.id
    assert user.subaccount_id == subaccount.id
    assert user.name == "Sam Owner"
    assert user.role_id == roles["OWNER"].id
    mock_uow.user_accounts.create.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_creates_completed_account_when_none_pending(mock_uow, context, roles, lookups):
    command = CompleteOnboardingCommand(
        gym={"name": "Iron Temple"},
        franchise={"name": "Uptown", "location": "5th Ave"},
        owner={"name": "Sam Owner"},
    )
    mock_uow.accounts.get_by_id.side_effect = (
        lambda account_id: mock_uow.accounts.create.call_args.args[0]
    )

    result = await CompleteOnboardingUseCase(mock_uow).execute(context, command)

    assert result.is_ok()
    account = mock_uow.accounts.create.call_args.args[0]
    assert account.onboarding_completed is True
    assert account.currency == "USD"

    assert result.value.gym.subaccount.name == "Uptown"
    assert result.value.gym.subaccount.location == "5th Ave"

    user = mock_uow.users.create.call_args.args[0]
    assert user.id == context.user_id
    link = mock_uow.user_accounts.create.call_args.args[0]
    assert link.is_owner is True
    assert link.account_id == account.id


@pytest.mark.asyncio
async def test_missing_owner_role(mock_uow, context, command):
    result = await CompleteOnboardingUseCase(mock_uow).execute(context, command)

    assert result.is_err()
    assert result.error.code == "ROLE_NOT_FOUND"
    mock_uow.subaccounts.create.assert_not_called()
