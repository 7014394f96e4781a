from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gymhub.domain.entities import Role


class IRoleRepository(ABC):
    """Role repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, role_id: UUID) -> Optional[Role]:
        """Get role by ID"""
        pass

    @abstractmethod
    async def get_by_name(self, name: str) -> Optional[Role]:
        """Get role by name"""
        pass

    @abstractmethod
    async def get_by_names(self, names: List[str]) -> List[Role]:
        """Get roles whose name is in the list"""
        pass

    @abstractmethod
    async def get_all(self) -> List[Role]:
        """Get every role"""
        pass

    @abstractmethod
    async def create(self, role: Role) -> Role:
        """Create a new role"""
        pass
