"""
Accept Invitation Use Case

Handles a signed-in user joining a franchise through a pending invitation.
"""

import logging
from datetime import datetime
from uuid import UUID

from gymhub.api.utils.jwt import generate_jwt
from gymhub.app.services.tenancy import describe_membership
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.domain.context import TenantContext
from gymhub.domain.entities import StatusName, User, UserAccount
from gymhub.libs.result import Error, Result, Return

from .dtos import AcceptInvitationResponse

logger = logging.getLogger(__name__)


class AcceptInvitationUseCase:
    """
    Use case for accepting an invitation.

    Business Rules:
    - Invitation must be addressed to the caller's e-mail
    - Only a pending invitation can be accepted (pending -> accepted is terminal)
    - Creates or updates the User row with the franchise and role
    - Creates the UserAccount link (never a second one for the same franchise)
    - User, link and status change commit together or not at all
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: TenantContext, invitation_id: UUID
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            context: Caller's tenant context
            invitation_id: Invitation chosen on the select-gym screen

        Returns:
            Result with AcceptInvitationResponse DTO, or Error
        """
        email = context.email.lower()

        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
            if invitation is None or invitation.email.lower() != email:
                return Return.err(Error("INVITATION_NOT_FOUND", "Invitation not found"))

            pending = await self.uow.statuses.get_by_name(StatusName.pending.value)
            accepted = await self.uow.statuses.get_by_name(StatusName.accepted.value)
            if pending is None or accepted is None:
                return Return.err(Error("STATUS_NOT_FOUND", "Invitation status not found"))

            if invitation.status_id != pending.id:
                return Return.err(
                    Error(
                        "INVITATION_ALREADY_ACCEPTED",
                        "This invitation has already been accepted",
                    )
                )

            subaccount = await self.uow.subaccounts.get_by_id(invitation.subaccount_id)
            if subaccount is None:
                return Return.err(Error("SUBACCOUNT_NOT_FOUND", "Franchise not found"))

            account = await self.uow.accounts.get_by_id(subaccount.account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Gym not found"))

            role = await self.uow.roles.get_by_id(invitation.role_id)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Invitation role not found"))

            existing_link = await self.uow.user_accounts.get_by_user_and_subaccount(
                context.user_id, account.id, subaccount.id
            )
            if existing_link:
                return Return.err(
                    Error("ALREADY_MEMBER", "You are already a member of this franchise")
                )

            now = datetime.utcnow()

            user = await self.uow.users.get_by_id(context.user_id)
            if user is None:
                identity = await self.uow.identities.get_by_id(context.user_id)
                name = identity.display_name() if identity else email.split("@")[0]
                user = User(
                    id=context.user_id,
                    subaccount_id=subaccount.id,
                    name=name,
                    email=email,
                    role_id=role.id,
                    is_active=True,
                )
                await self.uow.users.create(user)
            else:
                user.subaccount_id = subaccount.id
                user.role_id = role.id
                user.updated_at = now
                await self.uow.users.update(user)

            link = UserAccount(
                user_id=context.user_id,
                account_id=account.id,
                subaccount_id=subaccount.id,
                role_id=role.id,
                is_owner=False,
            )
            link = await self.uow.user_accounts.create(link)

            invitation.status_id = accepted.id
            invitation.responded_at = now
            await self.uow.invitations.update(invitation)

            gym = await describe_membership(self.uow, link)

            await self.uow.commit()

            logger.info(
                f"Invitation {invitation_id} accepted by {email}, "
                f"joined subaccount {subaccount.id} as {role.name}"
            )

            scoped = context.scoped_to(account.id, subaccount.id, role.name)
            return Return.ok(
                AcceptInvitationResponse(
                    redirect_to="/dashboard",
                    access_token=generate_jwt(scoped),
                    gym=gym,
                )
            )
