from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gymhub.app.repositories.invitation_repository import IInvitationRepository
from gymhub.domain.entities import Invitation, Status, StatusName


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def _pending(self):
        return (
            select(Invitation)
            .join(Status, col(Invitation.status_id) == col(Status.id))
            .where(Status.name == StatusName.pending.value)
        )

    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        stmt = select(Invitation).where(Invitation.id == invitation_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        stmt = select(Invitation).where(Invitation.token == token)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_pending_by_subaccount_and_email(
        self, subaccount_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by subaccount and email"""
        stmt = self._pending().where(
            Invitation.subaccount_id == subaccount_id,
            Invitation.email == email,
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_pending_by_email(
        self, email: str, token: Optional[str] = None
    ) -> List[Invitation]:
        """Get pending invitations for an email, optionally narrowed by token"""
        stmt = self._pending().where(Invitation.email == email)
        if token:
            stmt = stmt.where(Invitation.token == token)
        stmt = stmt.order_by(col(Invitation.invited_at).asc())
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_pending_by_subaccount_ids(
        self, subaccount_ids: List[UUID]
    ) -> List[Invitation]:
        """Get pending invitations for the given franchises"""
        if not subaccount_ids:
            return []
        stmt = (
            self._pending()
            .where(col(Invitation.subaccount_id).in_(subaccount_ids))
            .order_by(col(Invitation.invited_at).desc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation
