from typing import List, Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from gymhub.app.repositories.status_repository import IStatusRepository
from gymhub.domain.entities import Status


class StatusRepository(IStatusRepository):
    """Status repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, status_id: UUID) -> Optional[Status]:
        """Get status by ID"""
        stmt = select(Status).where(Status.id == status_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[Status]:
        """Get status by name"""
        stmt = select(Status).where(Status.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_all(self) -> List[Status]:
        """Get every status"""
        result = await self.session.exec(select(Status))
        return list(result.all())

    async def create(self, status: Status) -> Status:
        """Create a new status"""
        self.session.add(status)
        await self.session.flush()
        await self.session.refresh(status)
        return status
