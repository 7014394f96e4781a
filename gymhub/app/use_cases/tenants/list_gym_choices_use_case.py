"""
List Gym Choices Use Case

Backs the select-gym screen: the pending invitations addressed to the
caller, optionally narrowed to the one named by a deep-link token.
"""

import logging
from typing import Optional

from gymhub.app.services.invitation_tokens import display_expiry
from gymhub.app.services.tenancy import resolve_role_name
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.shared_dtos import AccountInfo, SubaccountInfo
from gymhub.domain.context import TenantContext
from gymhub.libs.result import Error, Result, Return

from .dtos import GymChoicesResponse, InvitationCard

logger = logging.getLogger(__name__)


class ListGymChoicesUseCase:
    """
    Business Rules:
    - Only invitations whose e-mail equals the caller's e-mail are listed
    - No invitations and no token: send the user to /onboarding
    - A token that matches nothing is an invalid link
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, context: TenantContext, token: Optional[str] = None
    ) -> Result[GymChoicesResponse]:
        async with self.uow:
            invitations = await self.uow.invitations.get_pending_by_email(
                context.email.lower(), token
            )

            if not invitations:
                if token:
                    return Return.err(
                        Error(
                            "INVALID_INVITATION_LINK",
                            "Invalid or expired invitation link",
                        )
                    )
                return Return.ok(GymChoicesResponse(redirect_to="/onboarding"))

            subaccounts = await self.uow.subaccounts.get_by_ids(
                list({i.subaccount_id for i in invitations})
            )
            subaccounts_by_id = {s.id: s for s in subaccounts}

            cards = []
            accounts = {}
            for invitation in invitations:
                subaccount = subaccounts_by_id.get(invitation.subaccount_id)
                if subaccount is None:
                    logger.warning(
                        f"Invitation {invitation.id} points at missing subaccount"
                    )
                    continue

                if subaccount.account_id not in accounts:
                    accounts[subaccount.account_id] = await self.uow.accounts.get_by_id(
                        subaccount.account_id
                    )
                account = accounts[subaccount.account_id]
                if account is None:
                    continue

                cards.append(
                    InvitationCard(
                        id=str(invitation.id),
                        account=AccountInfo(id=str(account.id), name=account.name),
                        subaccount=SubaccountInfo(
                            id=str(subaccount.id),
                            name=subaccount.name,
                            location=subaccount.location,
                        ),
                        role=await resolve_role_name(self.uow, invitation.role_id),
                        message=invitation.message,
                        invited_at=invitation.invited_at,
                        expires_at=display_expiry(invitation.invited_at),
                    )
                )

            return Return.ok(GymChoicesResponse(invitations=cards))
