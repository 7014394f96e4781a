from typing import Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gymhub.app.repositories.account_repository import IAccountRepository
from gymhub.domain.entities import Account


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get the oldest account registered with this contact email"""
        stmt = (
            select(Account)
            .where(Account.email == email)
            .order_by(col(Account.created_at).asc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def get_latest_incomplete_by_email(self, email: str) -> Optional[Account]:
        """Get the most recent account with this email still in onboarding"""
        stmt = (
            select(Account)
            .where(Account.email == email, Account.onboarding_completed == False)  # noqa: E712
            .order_by(col(Account.created_at).desc())
            .limit(1)
        )
        result = await self.session.exec(stmt)
        return result.first()

    async def create(self, account: Account) -> Account:
        """Create a new account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account
