"""
Sign Out Use Case

Revokes the session behind the caller's access token.
"""

from datetime import datetime

from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.domain.context import TenantContext
from gymhub.libs.result import Error, Result, Return

from .dtos import SignOutResponse


class SignOutUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, context: TenantContext) -> Result[SignOutResponse]:
        async with self.uow:
            session = await self.uow.sessions.get_by_id(context.session_id)
            if session is None:
                return Return.err(Error("SESSION_NOT_FOUND", "Session not found"))

            if not session.revoked:
                session.revoked = True
                session.revoked_at = datetime.utcnow()
                await self.uow.sessions.update(session)
                await self.uow.commit()

            return Return.ok(SignOutResponse(status="signed_out"))
