from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gymhub.app.repositories.role_repository import IRoleRepository
from gymhub.domain.entities import Role


class RoleRepository(IRoleRepository):
    """Role repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        """Get role by ID"""
        stmt = select(Role).where(Role.id == role_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_name(self, name: str) -> Optional[Role]:
        """Get role by name"""
        stmt = select(Role).where(Role.name == name)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_names(self, names: List[str]) -> List[Role]:
        """Get roles whose name is in the list"""
        if not names:
            return []
        stmt = select(Role).where(col(Role.name).in_(names))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_all(self) -> List[Role]:
        """Get every role"""
        result = await self.session.exec(select(Role))
        return list(result.all())

    async def create(self, role: Role) -> Role:
        """Create a new role"""
        self.session.add(role)
        await self.session.flush()
        await self.session.refresh(role)
        return role
