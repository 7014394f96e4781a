from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from gymhub.domain.context import TenantContext
from gymhub.domain.entities import Role, RoleName, Status, StatusName

# Repository methods that return a list; every other getter returns None
LIST_GETTERS = {
    "get_pending_by_email",
    "get_pending_by_subaccount_ids",
    "get_by_user_id",
    "get_owned_by_user",
    "get_by_subaccount_ids",
    "get_by_ids",
    "get_by_account_ids",
    "get_by_names",
    "get_all",
}

REPOSITORIES = {
    "identities": ["get_by_email", "get_by_id", "create", "update"],
    "sessions": ["get_by_id", "create", "update"],
    "users": ["get_by_id", "get_by_ids", "create", "update"],
    "accounts": [
        "get_by_id",
        "get_by_email",
        "get_latest_incomplete_by_email",
        "create",
        "update",
    ],
    "subaccounts": ["get_by_id", "get_by_ids", "get_by_account_ids", "create"],
    "user_accounts": [
        "get_by_user_id",
        "get_by_user_and_account",
        "get_by_user_and_subaccount",
        "get_owned_by_user",
        "get_by_subaccount_ids",
        "create",
        "update",
    ],
    "roles": ["get_by_id", "get_by_name", "get_by_names", "get_all", "create"],
    "statuses": ["get_by_id", "get_by_name", "get_all", "create"],
    "invitations": [
        "get_by_id",
        "get_by_token",
        "get_pending_by_subaccount_and_email",
        "get_pending_by_email",
        "get_pending_by_subaccount_ids",
        "create",
        "update",
    ],
}


def _mock_repository(methods):
    repo = MagicMock()
    for method in methods:
        if method in ("create", "update"):
            # Echo the entity back like a flush + refresh would
            setattr(repo, method, AsyncMock(side_effect=lambda entity: entity))
        elif method in LIST_GETTERS:
            setattr(repo, method, AsyncMock(return_value=[]))
        else:
            setattr(repo, method, AsyncMock(return_value=None))
    return repo


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for name, methods in REPOSITORIES.items():
        setattr(uow, name, _mock_repository(methods))

    return uow


@pytest.fixture
def roles():
    return {name.value: Role(id=uuid4(), name=name.value) for name in RoleName}


@pytest.fixture
def statuses():
    return {name.value: Status(id=uuid4(), name=name.value) for name in StatusName}


@pytest.fixture
def context():
    return TenantContext(
        user_id=uuid4(), email="owner@example.com", session_id=uuid4()
    )
