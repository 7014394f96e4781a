from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from gymhub.domain.entities import Session


class ISessionRepository(ABC):
    """Session repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, session_id: UUID) -> Optional[Session]:
        """Get session by ID"""
        pass

    @abstractmethod
    async def create(self, session_obj: Session) -> Session:
        """Create a new session"""
        pass

    @abstractmethod
    async def update(self, session_obj: Session) -> Session:
        """Update existing session"""
        pass
