from sqlmodel.ext.asyncio.session import AsyncSession

from gymhub.adapter.repositories.account_repository import AccountRepository
from gymhub.adapter.repositories.identity_repository import AuthIdentityRepository
from gymhub.adapter.repositories.invitation_repository import InvitationRepository
from gymhub.adapter.repositories.role_repository import RoleRepository
from gymhub.adapter.repositories.session_repository import SessionRepository
from gymhub.adapter.repositories.status_repository import StatusRepository
from gymhub.adapter.repositories.subaccount_repository import SubaccountRepository
from gymhub.adapter.repositories.user_account_repository import UserAccountRepository
from gymhub.adapter.repositories.user_repository import UserRepository
from gymhub.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.identities = AuthIdentityRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.users = UserRepository(self.session)
        self.accounts = AccountRepository(self.session)
        self.subaccounts = SubaccountRepository(self.session)
        self.user_accounts = UserAccountRepository(self.session)
        self.roles = RoleRepository(self.session)
        self.statuses = StatusRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
