from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gymhub.domain.entities import Subaccount


class ISubaccountRepository(ABC):
    """Subaccount repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, subaccount_id: UUID) -> Optional[Subaccount]:
        """Get subaccount by ID"""
        pass

    @abstractmethod
    async def get_by_ids(self, subaccount_ids: List[UUID]) -> List[Subaccount]:
        """Get subaccounts by a list of IDs"""
        pass

    @abstractmethod
    async def get_by_account_ids(self, account_ids: List[UUID]) -> List[Subaccount]:
        """Get all subaccounts of the given accounts"""
        pass

    @abstractmethod
    async def create(self, subaccount: Subaccount) -> Subaccount:
        """Create a new subaccount"""
        pass
