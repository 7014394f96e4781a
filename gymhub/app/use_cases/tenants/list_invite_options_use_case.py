from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.shared_dtos import SubaccountInfo
from gymhub.domain.context import TenantContext
from gymhub.domain.entities import ASSIGNABLE_ROLES
from gymhub.libs.result import Result, Return

from .dtos import InviteOptionsResponse


class ListInviteOptionsUseCase:
    """
    Data for the invite modal: the franchises of every gym the caller owns
    and the roles an invitation may grant.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: TenantContext) -> Result[InviteOptionsResponse]:
        async with self.uow:
            owned_links = await self.uow.user_accounts.get_owned_by_user(context.user_id)
            account_ids = list(dict.fromkeys(link.account_id for link in owned_links))

            subaccounts = await self.uow.subaccounts.get_by_account_ids(account_ids)

            names = [r.value for r in ASSIGNABLE_ROLES]
            roles = await self.uow.roles.get_by_names(names)
            found = {role.name for role in roles}

            return Return.ok(
                InviteOptionsResponse(
                    subaccounts=[
                        SubaccountInfo(id=str(s.id), name=s.name, location=s.location)
                        for s in subaccounts
                    ],
                    roles=[name for name in names if name in found],
                )
            )
