from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gymhub.app.repositories.user_account_repository import IUserAccountRepository
from gymhub.domain.entities import UserAccount


class UserAccountRepository(IUserAccountRepository):
    """UserAccount repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> List[UserAccount]:
        """Get all account links of a user, oldest first"""
        stmt = (
            select(UserAccount)
            .where(UserAccount.user_id == user_id)
            .order_by(col(UserAccount.created_at).asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_user_and_account(
        self, user_id: UUID, account_id: UUID
    ) -> Optional[UserAccount]:
        """Get the oldest link between a user and an account"""
        stmt = (
            select(UserAccount)
            .where(UserAccount.user_id == user_id, UserAccount.account_id == account_id)
            .order_by(col(UserAccount.created_at).asc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_by_user_and_subaccount(
        self, user_id: UUID, account_id: UUID, subaccount_id: UUID
    ) -> Optional[UserAccount]:
        """Get the link between a user and a specific franchise"""
        stmt = (
            select(UserAccount)
            .where(
                UserAccount.user_id == user_id,
                UserAccount.account_id == account_id,
                UserAccount.subaccount_id == subaccount_id,
            )
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_owned_by_user(self, user_id: UUID) -> List[UserAccount]:
        """Get the links where the user is an owner"""
        stmt = select(UserAccount).where(
            UserAccount.user_id == user_id,
            UserAccount.is_owner == True,  # noqa: E712
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_subaccount_ids(self, subaccount_ids: List[UUID]) -> List[UserAccount]:
        """Get all links attached to the given franchises"""
        if not subaccount_ids:
            return []
        stmt = select(UserAccount).where(
            col(UserAccount.subaccount_id).in_(subaccount_ids)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, user_account: UserAccount) -> UserAccount:
        """Create a new link"""
        self.session.add(user_account)
        await self.session.flush()
        await self.session.refresh(user_account)
        return user_account

    async def update(self, user_account: UserAccount) -> UserAccount:
        """Update existing link"""
        self.session.add(user_account)
        await self.session.flush()
        await self.session.refresh(user_account)
        return user_account
