import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from bindery.app import create_app
from bindery.database import Base, get_session
from bindery.store import RecordStore
import bindery.models  # noqa: F401

engine = create_async_engine("sqlite+aiosqlite://", echo=False)  # in-memory
TestSession = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def _test_session():
    async with TestSession() as s:
        yield s


@pytest.fixture(autouse=True)
async def setup_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


@pytest.fixture
async def session():
    async with TestSession() as s:
        yield s


@pytest.fixture
def store(session):
    return RecordStore(session)


@pytest.fixture
def app():
    app = create_app()
    app.dependency_overrides[get_session] = _test_session
    return app


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def served_client(app):
    """Client that sees unhandled errors as responses, the way a real server returns them."""
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
