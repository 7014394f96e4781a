"""
Complete Onboarding Use Case

Finishes the onboarding wizard: gym details, first franchise and owner
profile are written in one transaction.
"""

import logging
from datetime import datetime

from config import ApplicationConfig
from gymhub.api.utils.jwt import generate_jwt
from gymhub.app.services.tenancy import describe_membership
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.domain.context import TenantContext
from gymhub.domain.entities import Account, RoleName, Subaccount, User, UserAccount
from gymhub.libs.result import Error, Result, Return

from .dtos import CompleteOnboardingCommand, OnboardingResponse

logger = logging.getLogger(__name__)


class CompleteOnboardingUseCase:
    """
    Use case for completing gym onboarding.

    Business Rules:
    - Fills in the caller's most recent not-yet-onboarded gym, or creates a
      completed one when there is none
    - Creates the first franchise, named "<gym> Main" and located at the gym
      address unless given
    - The caller becomes OWNER of that franchise
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: TenantContext, command: CompleteOnboardingCommand
    ) -> Result[OnboardingResponse]:
        email = context.email.lower()
        now = datetime.utcnow()

        async with self.uow:
            owner_role = await self.uow.roles.get_by_name(RoleName.OWNER.value)
            if owner_role is None:
                return Return.err(
                    Error("ROLE_NOT_FOUND", "Error setting up user role: Role not found")
                )

            gym = command.gym
            account = await self.uow.accounts.get_latest_incomplete_by_email(email)
            if account:
                account.name = gym.name
                account.phone = gym.phone
                account.address = gym.address
                account.website = gym.website
                account.description = gym.description
                if command.currency:
                    account.currency = command.currency.upper()
                account.onboarding_completed = True
                account.updated_at = now
                account = await self.uow.accounts.update(account)
            else:
                account = Account(
                    name=gym.name,
                    email=email,
                    phone=gym.phone,
                    address=gym.address,
                    website=gym.website,
                    description=gym.description,
                    currency=(command.currency or ApplicationConfig.DEFAULT_CURRENCY).upper(),
                    onboarding_completed=True,
                )
                account = await self.uow.accounts.create(account)

            subaccount = Subaccount(
                account_id=account.id,
                name=command.franchise.name or f"{gym.name} Main",
                location=command.franchise.location or gym.address,
            )
            subaccount = await self.uow.subaccounts.create(subaccount)

            user = await self.uow.users.get_by_id(context.user_id)
            if user is None:
                user = User(
                    id=context.user_id,
                    subaccount_id=subaccount.id,
                    name=command.owner.name,
                    email=email,
                    phone=command.owner.phone,
                    role_id=owner_role.id,
                    is_active=True,
                )
                await self.uow.users.create(user)
            else:
                user.subaccount_id = subaccount.id
                user.name = command.owner.name
                user.phone = command.owner.phone
                user.role_id = owner_role.id
                user.updated_at = now
                await self.uow.users.update(user)

            link = await self.uow.user_accounts.get_by_user_and_account(
                context.user_id, account.id
            )
            if link:
                link.subaccount_id = subaccount.id
                link.role_id = owner_role.id
                link.is_owner = True
                link = await self.uow.user_accounts.update(link)
            else:
                link = UserAccount(
                    user_id=context.user_id,
                    account_id=account.id,
                    subaccount_id=subaccount.id,
                    role_id=owner_role.id,
                    is_owner=True,
                )
                link = await self.uow.user_accounts.create(link)

            summary = await describe_membership(self.uow, link)

            await self.uow.commit()

            logger.info(
                f"Onboarding completed for account {account.id} "
                f"with subaccount {subaccount.id}"
            )

            scoped = context.scoped_to(account.id, subaccount.id, owner_role.name)
            return Return.ok(
                OnboardingResponse(
                    redirect_to="/dashboard",
                    access_token=generate_jwt(scoped),
                    gym=summary,
                )
            )
