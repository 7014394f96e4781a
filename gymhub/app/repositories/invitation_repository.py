from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gymhub.domain.entities import Invitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[Invitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[Invitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_pending_by_subaccount_and_email(
        self, subaccount_id: UUID, email: str
    ) -> Optional[Invitation]:
        """Get pending invitation by subaccount and email"""
        pass

    @abstractmethod
    async def get_pending_by_email(
        self, email: str, token: Optional[str] = None
    ) -> List[Invitation]:
        """Get pending invitations for an email, optionally narrowed by token"""
        pass

    @abstractmethod
    async def get_pending_by_subaccount_ids(
        self, subaccount_ids: List[UUID]
    ) -> List[Invitation]:
        """Get pending invitations for the given franchises"""
        pass

    @abstractmethod
    async def create(self, invitation: Invitation) -> Invitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def update(self, invitation: Invitation) -> Invitation:
        """Update existing invitation"""
        pass
