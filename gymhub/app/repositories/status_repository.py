from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gymhub.domain.entities import Status


class IStatusRepository(ABC):
    """Status repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, status_id: UUID) -> Optional[Status]:
        """Get status by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Status]:
        """Get status by name"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Status]:
        """Get every status"""
        pass

    @abstractmethod
    async def create(self, status: Status) -> Status:
        """Create a new status"""
        pass
