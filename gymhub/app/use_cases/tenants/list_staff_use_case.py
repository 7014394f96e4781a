"""
List Staff Use Case

Backs the managers page: staff attached to the franchises the caller owns,
plus the invitations still pending there.
"""

from typing import Optional

from gymhub.app.services.invitation_tokens import display_expiry
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.app.use_cases.shared_dtos import SubaccountInfo
from gymhub.domain.context import TenantContext
from gymhub.libs.result import Result, Return

from .dtos import PendingInvitation, StaffListResponse, StaffMember

STATUS_FILTERS = ("all", "active", "inactive")


class ListStaffUseCase:
    """
    Business Rules:
    - Only franchises of gyms the caller owns are listed
    - The caller is never listed
    - search matches name, e-mail or franchise name (case-insensitive)
    - role and status filters apply to staff, not to invitations
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        context: TenantContext,
        search: Optional[str] = None,
        role: str = "all",
        status: str = "all",
    ) -> Result[StaffListResponse]:
        async with self.uow:
            owned_links = await self.uow.user_accounts.get_owned_by_user(context.user_id)
            account_ids = list(dict.fromkeys(link.account_id for link in owned_links))

            subaccounts = await self.uow.subaccounts.get_by_account_ids(account_ids)
            if not subaccounts:
                return Return.ok(StaffListResponse(staff=[], pending_invitations=[]))

            subaccount_info = {
                s.id: SubaccountInfo(id=str(s.id), name=s.name, location=s.location)
                for s in subaccounts
            }
            subaccount_ids = list(subaccount_info.keys())

            roles = {r.id: r.name for r in await self.uow.roles.get_all()}

            links = [
                link
                for link in await self.uow.user_accounts.get_by_subaccount_ids(subaccount_ids)
                if link.user_id != context.user_id
            ]
            users = await self.uow.users.get_by_ids(
                list(dict.fromkeys(link.user_id for link in links))
            )
            users_by_id = {u.id: u for u in users}

            staff = []
            for link in links:
                user = users_by_id.get(link.user_id)
                if user is None:
                    continue
                staff.append(
                    StaffMember(
                        user_id=str(user.id),
                        name=user.name or user.email,
                        email=user.email,
                        phone=user.phone,
                        role=roles.get(link.role_id or user.role_id),
                        subaccount=subaccount_info[link.subaccount_id],
                        is_active=user.is_active,
                        is_owner=link.is_owner,
                        created_at=link.created_at,
                    )
                )

            invitations = await self.uow.invitations.get_pending_by_subaccount_ids(
                subaccount_ids
            )

            return Return.ok(
                StaffListResponse(
                    staff=[m for m in staff if _matches(m, search, role, status)],
                    pending_invitations=[
                        PendingInvitation(
                            id=str(i.id),
                            email=i.email,
                            role=roles.get(i.role_id),
                            subaccount=subaccount_info[i.subaccount_id],
                            invited_at=i.invited_at,
                            expires_at=display_expiry(i.invited_at),
                        )
                        for i in invitations
                    ],
                )
            )


def _matches(member: StaffMember, search: Optional[str], role: str, status: str) -> bool:
    if search:
        term = search.lower()
        haystack = (member.name, member.email, member.subaccount.name)
        if not any(term in (value or "").lower() for value in haystack):
            return False

    if role and role.lower() != "all" and (member.role or "") != role.upper():
        return False

    if status == "active" and not member.is_active:
        return False
    if status == "inactive" and member.is_active:
        return False

    return True
