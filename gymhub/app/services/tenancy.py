"""
Tenancy helpers shared by the sign-up, select-gym and onboarding flows.
"""

import logging
from typing import Optional, Tuple

from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.shared_dtos import AccountInfo, GymInfo, SubaccountInfo
from gymhub.domain.entities import AuthIdentity, Account, Role, User, UserAccount

logger = logging.getLogger(__name__)


async def provision_owner_account(
    uow: UnitOfWork, identity: AuthIdentity, owner_role: Role, currency: str
) -> Tuple[Account, UserAccount]:
    """
    Create a placeholder gym owned by ``identity``.

    Writes a not-yet-onboarded Account, the User row when missing, and an
    owner UserAccount. The caller commits.
    """
    display_name = identity.display_name()

    account = Account(
        name=f"{display_name}'s Gym",
        email=identity.email,
        currency=currency,
        onboarding_completed=False,
    )
    account = await uow.accounts.create(account)

    user = await uow.users.get_by_id(identity.id)
    if user is None:
        user = User(
            id=identity.id,
            name=display_name,
            email=identity.email,
            role_id=owner_role.id,
            is_active=True,
        )
        await uow.users.create(user)

    user_account = UserAccount(
        user_id=identity.id,
        account_id=account.id,
        role_id=owner_role.id,
        is_owner=True,
    )
    user_account = await uow.user_accounts.create(user_account)

    logger.info(f"Provisioned account {account.id} for {identity.email}")
    return account, user_account


async def resolve_role_name(uow: UnitOfWork, role_id) -> Optional[str]:
    if role_id is None:
        return None
    role = await uow.roles.get_by_id(role_id)
    return role.name if role else None


async def describe_membership(uow: UnitOfWork, link: UserAccount) -> Optional[GymInfo]:
    """Summarize the gym behind a UserAccount, or None if the account is gone"""
    account = await uow.accounts.get_by_id(link.account_id)
    if account is None:
        logger.warning(f"UserAccount {link.id} points at missing account {link.account_id}")
        return None

    subaccount = None
    if link.subaccount_id is not None:
        subaccount = await uow.subaccounts.get_by_id(link.subaccount_id)

    return GymInfo(
        account=AccountInfo(id=str(account.id), name=account.name),
        subaccount=(
            SubaccountInfo(
                id=str(subaccount.id), name=subaccount.name, location=subaccount.location
            )
            if subaccount
            else None
        ),
        role=await resolve_role_name(uow, link.role_id),
        is_owner=link.is_owner,
        onboarding_completed=account.onboarding_completed,
    )
