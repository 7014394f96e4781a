import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from gymhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from gymhub.api.utils.jwt import verify_jwt
from gymhub.app.services.reference_data import seed_reference_data
from gymhub.app.services.unit_of_work import UnitOfWork
from gymhub.domain.context import TenantContext

# Registers every table on SQLModel.metadata
import gymhub.domain.entities  # noqa: F401

logger = logging.getLogger(__name__)

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()


async def init_db():
    """Create missing tables and seed the roles / status lookup rows"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    async with AsyncSessionLocal() as session:
        await seed_reference_data(SqlAlchemyUnitOfWork(session))


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_tenant_context(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> TenantContext:
    """
    Dependency that turns the bearer token into a TenantContext.

    Args:
        credentials: Bearer token from Authorization header
        uow: Unit of work used to check the session

    Returns:
        TenantContext with identity, session and active gym

    Raises:
        HTTPException: 401 if the token is invalid or expired, or its
            session is unknown or revoked
    """
    payload = verify_jwt(credentials.credentials)
    if payload is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        context = TenantContext.from_claims(payload)
    except (KeyError, ValidationError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token claims",
        )

    async with uow:
        session = await uow.sessions.get_by_id(context.session_id)
        if session is None or session.revoked:
            logger.warning(f"Rejected token for session {context.session_id}")
            raise HTTPException(
                status_code=status.HTTP_401_UNAUTHORIZED,
                detail="Session has been revoked",
            )

    return context
