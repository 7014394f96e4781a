from typing import List, Optional
from uuid import UUID

from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from gymhub.app.repositories.subaccount_repository import ISubaccountRepository
from gymhub.domain.entities import Subaccount


class SubaccountRepository(ISubaccountRepository):
    """Subaccount repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, subaccount_id: UUID) -> Optional[Subaccount]:
        """Get subaccount by ID"""
        stmt = select(Subaccount).where(Subaccount.id == subaccount_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_ids(self, subaccount_ids: List[UUID]) -> List[Subaccount]:
        """Get subaccounts by a list of IDs"""
        if not subaccount_ids:
            return []
        stmt = select(Subaccount).where(col(Subaccount.id).in_(subaccount_ids))
        result = await self.session.exec(stmt)
        return list(result.all())

    async def get_by_account_ids(self, account_ids: List[UUID]) -> List[Subaccount]:
        """Get all subaccounts of the given accounts"""
        if not account_ids:
            return []
        stmt = (
            select(Subaccount)
            .where(col(Subaccount.account_id).in_(account_ids))
            .order_by(col(Subaccount.created_at).asc())
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def create(self, subaccount: Subaccount) -> Subaccount:
        """Create a new subaccount"""
        self.session.add(subaccount)
        await self.session.flush()
        await self.session.refresh(subaccount)
        return subaccount
