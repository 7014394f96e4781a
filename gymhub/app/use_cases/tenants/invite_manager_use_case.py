"""
Invite Manager Use Case

Handles an owner inviting a manager or trainer to one of their franchises.
"""

import logging

from gymhub.app.services.invitation_tokens import (
    build_invite_link,
    display_expiry,
    generate_invitation_token,
)
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.shared_dtos import SubaccountInfo
from gymhub.domain.context import TenantContext
from gymhub.domain.entities import ASSIGNABLE_ROLES, Invitation, StatusName
from gymhub.libs.result import Error, Result, Return

from .dtos import InvitationResponse, InviteManagerCommand

logger = logging.getLogger(__name__)


class InviteManagerUseCase:
    """
    Use case for inviting a user to join a franchise.

    Business Rules:
    - Franchise must exist
    - Only an owner of the franchise's gym can invite
    - Role must be one of the assignable roles (MANAGER, TRAINER)
    - At most one pending invitation per (email, franchise)
    - Token is two base-36 fragments, regenerated on collision
    - No e-mail is sent; the caller shares the returned deep link
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: TenantContext, command: InviteManagerCommand
    ) -> Result[InvitationResponse]:
        """
        Execute invite manager use case.

        Args:
            context: Caller's tenant context
            command: Invitee e-mail, franchise, role and optional note

        Returns:
            Result with InvitationResponse DTO, or Error
        """
        email = command.email.strip().lower()

        async with self.uow:
            subaccount = await self.uow.subaccounts.get_by_id(command.subaccount_id)
            if subaccount is None:
                return Return.err(Error("SUBACCOUNT_NOT_FOUND", "Franchise not found"))

            owned_links = await self.uow.user_accounts.get_owned_by_user(context.user_id)
            if not any(link.account_id == subaccount.account_id for link in owned_links):
                return Return.err(
                    Error("NOT_AN_OWNER", "Only the gym owner can invite to this franchise")
                )

            role_name = command.role.strip().upper()
            role = None
            if role_name in {r.value for r in ASSIGNABLE_ROLES}:
                role = await self.uow.roles.get_by_name(role_name)
            if role is None:
                return Return.err(
                    Error(
                        "INVALID_ROLE",
                        f"Invalid role: {command.role}. Must be one of: "
                        + ", ".join(r.value for r in ASSIGNABLE_ROLES),
                    )
                )

            pending = await self.uow.statuses.get_by_name(StatusName.pending.value)
            if pending is None:
                return Return.err(Error("STATUS_NOT_FOUND", "Pending status not found"))

            existing = await self.uow.invitations.get_pending_by_subaccount_and_email(
                subaccount.id, email
            )
            if existing:
                return Return.err(
                    Error(
                        "INVITATION_ALREADY_PENDING",
                        "An invitation is already pending for this email and franchise",
                    )
                )

            token = generate_invitation_token()
            while await self.uow.invitations.get_by_token(token):
                token = generate_invitation_token()

            invitation = Invitation(
                subaccount_id=subaccount.id,
                email=email,
                role_id=role.id,
                status_id=pending.id,
                token=token,
                invited_by=context.user_id,
                message=command.message or None,
            )
            invitation = await self.uow.invitations.create(invitation)

            await self.uow.commit()

            logger.info(
                f"Invitation {invitation.id} created for {email} "
                f"to subaccount {subaccount.id} as {role.name}"
            )

            return Return.ok(
                InvitationResponse(
                    id=str(invitation.id),
                    email=email,
                    role=role.name,
                    subaccount=SubaccountInfo(
                        id=str(subaccount.id),
                        name=subaccount.name,
                        location=subaccount.location,
                    ),
                    token=token,
                    invite_link=build_invite_link(token),
                    invited_at=invitation.invited_at,
                    expires_at=display_expiry(invitation.invited_at),
                    message=invitation.message,
                )
            )
