"""
Load Context Use Case

Loads the current identity, profile and gym context from the tenant context.
"""

from gymhub.app.services.tenancy import describe_membership, resolve_role_name
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.domain.context import TenantContext
from gymhub.libs.result import Error, Result, Return

from .dtos import ContextResponse, IdentityInfo, ProfileInfo


class LoadContextUseCase:
    """
    Use case for loading current user and gym context.

    Business Rules:
    - Identity must exist
    - Profile is optional (invited users without a gym have none yet)
    - Lists every gym the user belongs to, oldest link first
    - current is the link matching the token's account and franchise
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: TenantContext) -> Result[ContextResponse]:
        """
        Execute load context use case.

        Args:
            context: Tenant context decoded from the access token

        Returns:
            Result with ContextResponse, or Error
        """
        async with self.uow:
            identity = await self.uow.identities.get_by_id(context.user_id)
            if identity is None:
                return Return.err(Error("IDENTITY_NOT_FOUND", "Identity not found"))

            profile = None
            user = await self.uow.users.get_by_id(context.user_id)
            if user is not None:
                profile = ProfileInfo(
                    id=str(user.id),
                    name=user.name,
                    email=user.email,
                    phone=user.phone,
                    role=await resolve_role_name(self.uow, user.role_id),
                    subaccount_id=str(user.subaccount_id) if user.subaccount_id else None,
                    is_active=user.is_active,
                )

            gyms = []
            current = None
            for link in await self.uow.user_accounts.get_by_user_id(context.user_id):
                gym = await describe_membership(self.uow, link)
                if gym is None:
                    continue
                gyms.append(gym)
                if (
                    current is None
                    and link.account_id == context.account_id
                    and (context.subaccount_id is None or link.subaccount_id == context.subaccount_id)
                ):
                    current = gym

            return Return.ok(
                ContextResponse(
                    identity=IdentityInfo(
                        id=str(identity.id),
                        email=identity.email,
                        name=identity.name,
                        created_at=identity.created_at,
                        last_sign_in_at=identity.last_sign_in_at,
                    ),
                    profile=profile,
                    current=current,
                    gyms=gyms,
                )
            )
