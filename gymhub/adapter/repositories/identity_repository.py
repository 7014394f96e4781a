from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from gymhub.app.repositories.identity_repository import IAuthIdentityRepository
from gymhub.domain.entities import AuthIdentity


class AuthIdentityRepository(IAuthIdentityRepository):
    """Auth identity repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[AuthIdentity]:
        """Get identity by email address"""
        stmt = select(AuthIdentity).where(AuthIdentity.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, identity_id: UUID) -> Optional[AuthIdentity]:
        """Get identity by ID"""
        stmt = select(AuthIdentity).where(AuthIdentity.id == identity_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, identity: AuthIdentity) -> AuthIdentity:
        """Create a new identity"""
        self.session.add(identity)
        await self.session.flush()
        await self.session.refresh(identity)
        return identity

    async def update(self, identity: AuthIdentity) -> AuthIdentity:
        """Update existing identity"""
        self.session.add(identity)
        await self.session.flush()
        await self.session.refresh(identity)
        return identity
