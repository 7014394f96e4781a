"""
Login Use Case

Handles sign-in and decides whether the user lands on the dashboard or the
onboarding wizard.
"""

import bcrypt
from datetime import datetime, timedelta

from config import ApplicationConfig
from gymhub.api.utils.jwt import generate_jwt
from gymhub.app.services.tenancy import describe_membership
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.domain.context import TenantContext
from gymhub.domain.entities import Session
from gymhub.libs.result import Error, Result, Return

from .dtos import AuthResponse


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - Identity must have a users row, otherwise the person never finished
      signing up
    - JWT scoped to the user's first account link
    - Lands on /dashboard only when that account finished onboarding
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse, or Error
        """
        email = email.strip().lower()

        async with self.uow:
            identity = await self.uow.identities.get_by_email(email)

            # Always perform hash work even if the identity is not found
            if identity is None:
                bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            password_valid = bcrypt.checkpw(
                password.encode(), identity.password_hash.encode()
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            user = await self.uow.users.get_by_id(identity.id)
            if user is None:
                return Return.err(
                    Error(
                        "USER_NOT_FOUND",
                        "User account not found. Please sign up first.",
                    )
                )

            # No link yet means the user still has to pick or create a gym
            redirect_to = "/onboarding"
            gym = None
            links = await self.uow.user_accounts.get_by_user_id(user.id)
            if links:
                gym = await describe_membership(self.uow, links[0])
                if gym is None:
                    return Return.err(
                        Error("ACCOUNT_NOT_FOUND", "Error checking account status")
                    )
                if gym.onboarding_completed:
                    redirect_to = "/dashboard"

            session = Session(
                identity_id=identity.id,
                expires_at=datetime.utcnow()
                + timedelta(days=ApplicationConfig.SESSION_DAYS),
            )
            session = await self.uow.sessions.create(session)

            identity.last_sign_in_at = datetime.utcnow()
            await self.uow.identities.update(identity)

            await self.uow.commit()

            context = TenantContext(
                user_id=identity.id, email=email, session_id=session.id
            )
            if links:
                context = context.scoped_to(
                    links[0].account_id, links[0].subaccount_id, gym.role
                )

            return Return.ok(
                AuthResponse(
                    access_token=generate_jwt(context),
                    session_id=str(session.id),
                    user_id=str(identity.id),
                    email=email,
                    redirect_to=redirect_to,
                    gym=gym,
                )
            )
