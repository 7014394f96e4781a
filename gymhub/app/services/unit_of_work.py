from abc import ABC, abstractmethod

from gymhub.app.repositories.account_repository import IAccountRepository
from gymhub.app.repositories.identity_repository import IAuthIdentityRepository
from gymhub.app.repositories.invitation_repository import IInvitationRepository
from gymhub.app.repositories.role_repository import IRoleRepository
from gymhub.app.repositories.session_repository import ISessionRepository
from gymhub.app.repositories.status_repository import IStatusRepository
from gymhub.app.repositories.subaccount_repository import ISubaccountRepository
from gymhub.app.repositories.user_account_repository import IUserAccountRepository
from gymhub.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    identities: IAuthIdentityRepository
    sessions: ISessionRepository
    users: IUserRepository
    accounts: IAccountRepository
    subaccounts: ISubaccountRepository
    user_accounts: IUserAccountRepository
    roles: IRoleRepository
    statuses: IStatusRepository
    invitations: IInvitationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
