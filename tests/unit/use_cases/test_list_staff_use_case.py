from uuid import uuid4

import pytest

from gymhub.app.use_cases.tenants import ListStaffUseCase
from gymhub.domain.entities import Invitation, Subaccount, User, UserAccount


@pytest.fixture
def staff(mock_uow, context, roles):
    account_id = uuid4()
    downtown = Subaccount(id=uuid4(), account_id=account_id, name="Downtown")
    uptown = Subaccount(id=uuid4(), account_id=account_id, name="Uptown")

    alice = User(id=uuid4(), email="alice@x.com", name="Alice", is_active=True)
    bob = User(id=uuid4(), email="bob@x.com", name="Bob", is_active=False)

    mock_uow.user_accounts.get_owned_by_user.return_value = [
        UserAccount(user_id=context.user_id, account_id=account_id, is_owner=True)
    ]
    mock_uow.subaccounts.get_by_account_ids.return_value = [downtown, uptown]
    mock_uow.roles.get_all.return_value = list(roles.values())
    mock_uow.user_accounts.get_by_subaccount_ids.return_value = [
        UserAccount(
            user_id=context.user_id,
            account_id=account_id,
            subaccount_id=downtown.id,
            role_id=roles["OWNER"].id,
            is_owner=True,
        ),
        UserAccount(
            user_id=alice.id,
            account_id=account_id,
            subaccount_id=downtown.id,
            role_id=roles["MANAGER"].id,
        ),
        UserAccount(
            user_id=bob.id,
            account_id=account_id,
            subaccount_id=uptown.id,
            role_id=roles["TRAINER"].id,
        ),
    ]
    mock_uow.users.get_by_ids.return_value = [alice, bob]
    mock_uow.invitations.get_pending_by_subaccount_ids.return_value = [
        Invitation(
            subaccount_id=uptown.id,
            email="carol@x.com",
            role_id=roles["MANAGER"].id,
            status_id=uuid4(),
            token="tok",
        )
    ]
    return downtown, uptown


@pytest.mark.asyncio
async def test_lists_staff_excluding_caller(mock_uow, context, staff):
    result = await ListStaffUseCase(mock_uow).execute(context)

    assert result.is_ok()
    names = [m.name for m in result.value.staff]
    assert names == ["Alice", "Bob"]
    assert result.value.staff[0].role == "MANAGER"
    assert result.value.staff[1].subaccount.name == "Uptown"

    [invitation] = result.value.pending_invitations
    assert invitation.email == "carol@x.com"
    assert invitation.role == "MANAGER"
    assert invitation.subaccount.name == "Uptown"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "search, role, status, expected",
    [
        ("ALI", "all", "all", ["Alice"]),
        ("uptown", "all", "all", ["Bob"]),
        (None, "TRAINER", "all", ["Bob"]),
        (None, "all", "active", ["Alice"]),
        (None, "all", "inactive", ["Bob"]),
        ("alice", "TRAINER", "all", []),
    ],
)
async def test_filters(mock_uow, context, staff, search, role, status, expected):
    result = await ListStaffUseCase(mock_uow).execute(context, search, role, status)

    assert result.is_ok()
    assert [m.name for m in result.value.staff] == expected
    assert len(result.value.pending_invitations) == 1


@pytest.mark.asyncio
async def test_caller_without_gyms_sees_nothing(mock_uow, context):
    result = await ListStaffUseCase(mock_uow).execute(context)

    assert result.is_ok()
    assert result.value.staff == []
    assert result.value.pending_invitations == []
    mock_uow.user_accounts.get_by_subaccount_ids.assert_not_called()
