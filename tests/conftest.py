import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from todo_app.main import app
from todo_app.database import build_engine, build_sessionmaker, get_db, init_models

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"

@pytest.fixture
async def engine():
    # one in-memory database per test
    engine_test = build_engine(TEST_DATABASE_URL, poolclass=StaticPool)
    await init_models(engine_test)
    yield engine_test
    await engine_test.dispose()

@pytest.fixture
def sessions(engine):
    return build_sessionmaker(engine)

@pytest.fixture
async def db(sessions):
    async with sessions() as session:
        yield session

@pytest.fixture
async def client(sessions):
    async def override_get_db():
        async with sessions() as session:
            yield session
    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
