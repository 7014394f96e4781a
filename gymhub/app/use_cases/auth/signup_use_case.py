import logging
from datetime import datetime, timedelta

import bcrypt

from config import ApplicationConfig
from gymhub.api.utils.jwt import generate_jwt
from gymhub.app.services.tenancy import describe_membership, provision_owner_account
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.domain.context import TenantContext
from gymhub.domain.entities import AuthIdentity, RoleName, Session
from gymhub.libs.result import Error, Result, Return

from .dtos import AuthResponse, SignupCommand

logger = logging.getLogger(__name__)


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[AuthResponse] (structured response)

    Business Logic:
    1. Reject an email that already has an identity
    2. Create the identity (bcrypt cost factor 12) and a session
    3. If invitations are pending for the email, stop there and send the
       user to /select-gym so they can choose
    4. Otherwise provision a placeholder gym they own and send them to
       /onboarding
    5. Everything above commits in one transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[AuthResponse]:
        """
        Execute signup use case

        Args:
            command: SignupCommand with validated email, password, name

        Returns:
            Result[AuthResponse] or Error(EMAIL_ALREADY_EXISTS / ROLE_NOT_FOUND)
        """
        email = command.email.strip().lower()

        async with self.uow:
            existing_identity = await self.uow.identities.get_by_email(email)
            if existing_identity:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            identity = AuthIdentity(
                email=email,
                password_hash=password_hash.decode("utf-8"),
                name=command.name.strip() or None,
            )
            identity = await self.uow.identities.create(identity)

            session = Session(
                identity_id=identity.id,
                expires_at=datetime.utcnow()
                + timedelta(days=ApplicationConfig.SESSION_DAYS),
            )
            session = await self.uow.sessions.create(session)

            context = TenantContext(
                user_id=identity.id, email=email, session_id=session.id
            )

            # Invited users pick between joining and starting their own gym
            pending_invitations = await self.uow.invitations.get_pending_by_email(email)
            if pending_invitations:
                await self.uow.commit()
                logger.info(
                    f"Signup {email} has {len(pending_invitations)} pending invitation(s)"
                )
                return Return.ok(
                    AuthResponse(
                        access_token=generate_jwt(context),
                        session_id=str(session.id),
                        user_id=str(identity.id),
                        email=email,
                        redirect_to="/select-gym",
                        pending_invitations=len(pending_invitations),
                    )
                )

            owner_role = await self.uow.roles.get_by_name(RoleName.OWNER.value)
            if owner_role is None:
                return Return.err(
                    Error("ROLE_NOT_FOUND", "Error setting up user role: Role not found")
                )

            account, user_account = await provision_owner_account(
                self.uow, identity, owner_role, ApplicationConfig.DEFAULT_CURRENCY
            )
            gym = await describe_membership(self.uow, user_account)

            await self.uow.commit()

            context = context.scoped_to(account.id, None, owner_role.name)
            return Return.ok(
                AuthResponse(
                    access_token=generate_jwt(context),
                    session_id=str(session.id),
                    user_id=str(identity.id),
                    email=email,
                    redirect_to="/onboarding",
                    gym=gym,
                )
            )
