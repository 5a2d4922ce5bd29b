from uuid import UUID

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from teamspace.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from teamspace.adapter.tables import UserRecord
from teamspace.api.app import create_app
from teamspace.api.utils.jwt import generate_jwt
from teamspace.depends import get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def users(db_session, test_data):
    """Seed the account projection; returns user key -> user id (str)"""
    seeded = {}
    for key, data in test_data.get_copy("users").items():
        db_session.add(
            UserRecord(
                id=UUID(data["id"]),
                email=data["email"],
                name=data["name"],
                avatar_url=data["avatar_url"],
            )
        )
        seeded[key] = data["id"]
    await db_session.commit()
    return seeded


@pytest_asyncio.fixture
def auth(users):
    """auth("alice") -> Authorization header for that seeded user"""

    def headers_for(key: str) -> dict:
        return {"Authorization": f"Bearer {generate_jwt(UUID(users[key]))}"}

    return headers_for


@pytest_asyncio.fixture
async def client(db_session):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
