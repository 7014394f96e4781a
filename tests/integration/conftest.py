import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from gymhub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from gymhub.api.app import create_app
from gymhub.app.services.reference_data import seed_reference_data
from gymhub.depends import get_unit_of_work


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        await seed_reference_data(SqlAlchemyUnitOfWork(session))
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def owner(client):
    """
    An onboarded gym owner with one franchise, "Downtown".

    Returns the onboarding response body plus the owner's e-mail.
    """
    response = await client.post(
        "/auth/signup",
        json={"email": "owner@x.com", "password": "password123", "name": "Olive Owner"},
    )
    assert response.status_code == 201
    token = response.json()["access_token"]

    response = await client.post(
        "/onboarding/complete",
        json={
            "gym": {"name": "Iron Temple", "address": "1 Main St"},
            "franchise": {"name": "Downtown"},
            "owner": {"name": "Olive Owner"},
        },
        headers=bearer(token),
    )
    assert response.status_code == 200
    return {"email": "owner@x.com", **response.json()}
