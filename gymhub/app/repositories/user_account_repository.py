from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gymhub.domain.entities import UserAccount


class IUserAccountRepository(ABC):
    """UserAccount repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> List[UserAccount]:
        """Get all account links of a user, oldest first"""
        pass

    @abstractmethod
    async def get_by_user_and_account(
        self, user_id: UUID, account_id: UUID
    ) -> Optional[UserAccount]:
        """Get the oldest link between a user and an account"""
        pass

    @abstractmethod
    async def get_by_user_and_subaccount(
        self, user_id: UUID, account_id: UUID, subaccount_id: UUID
    ) -> Optional[UserAccount]:
        """Get the link between a user and a specific franchise"""
        pass

    @abstractmethod
    async def get_owned_by_user(self, user_id: UUID) -> List[UserAccount]:
        """Get the links where the user is an owner"""
        pass

    @abstractmethod
    async def get_by_subaccount_ids(self, subaccount_ids: List[UUID]) -> List[UserAccount]:
        """Get all links attached to the given franchises"""
        pass

    @abstractmethod
    async def create(self, user_account: UserAccount) -> UserAccount:
        """Create a new link"""
        pass

    @abstractmethod
    async def update(self, user_account: UserAccount) -> UserAccount:
        """Update existing link"""
        pass
