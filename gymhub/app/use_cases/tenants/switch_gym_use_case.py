"""
Switch Gym Use Case

Re-issues the access token for another gym (and optionally franchise) the
user belongs to.
"""

from typing import Optional
from uuid import UUID

from gymhub.api.utils.jwt import generate_jwt
from gymhub.app.services.tenancy import describe_membership
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.domain.context import TenantContext
from gymhub.libs.result import Error, Result, Return

from .dtos import SwitchGymResponse


class SwitchGymUseCase:
    """
    Business Rules:
    - User must hold a UserAccount for the target gym
    - When a franchise is given the link must be for that franchise
    - New token carries the link's franchise and role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        context: TenantContext,
        account_id: UUID,
        subaccount_id: Optional[UUID] = None,
    ) -> Result[SwitchGymResponse]:
        async with self.uow:
            if subaccount_id is not None:
                link = await self.uow.user_accounts.get_by_user_and_subaccount(
                    context.user_id, account_id, subaccount_id
                )
            else:
                link = await self.uow.user_accounts.get_by_user_and_account(
                    context.user_id, account_id
                )

            if link is None:
                return Return.err(
                    Error("NOT_A_MEMBER", "You are not a member of this gym")
                )

            gym = await describe_membership(self.uow, link)
            if gym is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Gym not found"))

            scoped = context.scoped_to(link.account_id, link.subaccount_id, gym.role)
            return Return.ok(
                SwitchGymResponse(access_token=generate_jwt(scoped), gym=gym)
            )
