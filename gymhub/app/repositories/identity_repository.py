from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from gymhub.domain.entities import AuthIdentity


class IAuthIdentityRepository(ABC):
    """Auth identity repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[AuthIdentity]:
        """Get identity by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, identity_id: UUID) -> Optional[AuthIdentity]:
        """Get identity by ID"""
        pass

    @abstractmethod
    async def create(self, identity: AuthIdentity) -> AuthIdentity:
        """Create a new identity"""
        pass

    @abstractmethod
    async def update(self, identity: AuthIdentity) -> AuthIdentity:
        """Update existing identity"""
        pass
