"""
Create Gym Use Case

The "start my own gym" choice on the select-gym screen.
"""

from config import ApplicationConfig
from gymhub.api.utils.jwt import generate_jwt
from gymhub.app.services.tenancy import provision_owner_account, resolve_role_name
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.shared_dtos import AccountInfo
from gymhub.domain.context import TenantContext
from gymhub.domain.entities import RoleName
from gymhub.libs.result import Error, Result, Return

from .dtos import CreateGymResponse


class CreateGymUseCase:
    """
    Business Rules:
    - An existing gym registered under the caller's e-mail is reused, and
      nothing is written
    - Otherwise a placeholder gym owned by the caller is provisioned
    - Pending invitations are left untouched
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: TenantContext) -> Result[CreateGymResponse]:
        async with self.uow:
            owner_role = await self.uow.roles.get_by_name(RoleName.OWNER.value)
            if owner_role is None:
                return Return.err(
                    Error("ROLE_NOT_FOUND", "Error setting up user role: Role not found")
                )

            existing = await self.uow.accounts.get_by_email(context.email.lower())
            if existing:
                scoped = context
                link = await self.uow.user_accounts.get_by_user_and_account(
                    context.user_id, existing.id
                )
                if link:
                    scoped = context.scoped_to(
                        existing.id,
                        link.subaccount_id,
                        await resolve_role_name(self.uow, link.role_id),
                    )
                return Return.ok(
                    CreateGymResponse(
                        redirect_to="/onboarding",
                        access_token=generate_jwt(scoped),
                        account=AccountInfo(id=str(existing.id), name=existing.name),
                    )
                )

            identity = await self.uow.identities.get_by_id(context.user_id)
            if identity is None:
                return Return.err(Error("IDENTITY_NOT_FOUND", "Identity not found"))

            account, _ = await provision_owner_account(
                self.uow, identity, owner_role, ApplicationConfig.DEFAULT_CURRENCY
            )
            account_info = AccountInfo(id=str(account.id), name=account.name)
            await self.uow.commit()

            scoped = context.scoped_to(account.id, None, owner_role.name)
            return Return.ok(
                CreateGymResponse(
                    redirect_to="/onboarding",
                    access_token=generate_jwt(scoped),
                    account=account_info,
                )
            )
