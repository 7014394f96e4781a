from uuid import uuid4

import pytest

from gymhub.api.utils.jwt import verify_jwt
from gymhub.app.use_cases.tenants import SwitchGymUseCase
from gymhub.domain.entities import Account, Subaccount, UserAccount


@pytest.mark.asyncio
async def test_switch_to_member_franchise(mock_uow, context, roles):
    account = Account(id=uuid4(), name="Iron Temple")
    subaccount = Subaccount(id=uuid4(), account_id=account.id, name="Downtown")
    link = UserAccount(
        user_id=context.user_id,
        account_id=account.id,
        subaccount_id=subaccount.id,
        role_id=roles["MANAGER"].id,
    )
    mock_uow.user_accounts.get_by_user_and_subaccount.return_value = link
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.subaccounts.get_by_id.return_value = subaccount
    mock_uow.roles.get_by_id.return_value = roles["MANAGER"]

    result = await SwitchGymUseCase(mock_uow).execute(context, account.id, subaccount.id)

    assert result.is_ok()
    assert result.value.gym.subaccount.name == "Downtown"
    claims = verify_jwt(result.value.access_token)
    assert claims["account_id"] == str(account.id)
    assert claims["subaccount_id"] == str(subaccount.id)
    assert claims["role"] == "MANAGER"
    assert claims["session_id"] == str(context.session_id)


@pytest.mark.asyncio
async def test_switch_by_account_only(mock_uow, context, roles):
    account = Account(id=uuid4(), name="Iron Temple")
    mock_uow.user_accounts.get_by_user_and_account.return_value = UserAccount(
        user_id=context.user_id, account_id=account.id, role_id=roles["OWNER"].id, is_owner=True
    )
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.roles.get_by_id.return_value = roles["OWNER"]

    result = await SwitchGymUseCase(mock_uow).execute(context, account.id)

    assert result.is_ok()
    assert result.value.gym.is_owner is True
    mock_uow.user_accounts.get_by_user_and_subaccount.assert_not_called()


@pytest.mark.asyncio
async def test_switch_to_foreign_gym(mock_uow, context):
    result = await SwitchGymUseCase(mock_uow).execute(context, uuid4(), uuid4())

    assert result.is_err()
    assert result.error.code == "NOT_A_MEMBER"
