"""Root conftest: shared async DB, service and HTTP client fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test database
    - db_manager replaced so the readiness check pings the test engine

Design Decisions:
    - SQLite in-memory with StaticPool: every session shares one connection,
      so rows committed by one session are visible to the next
    - Services built from the same session the test inspects
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool  # noqa: E402

from stridefund.db.base import Base  # noqa: E402
import stridefund.models  # noqa: E402,F401
import stridefund.infrastructure.database as db_module  # noqa: E402
from stridefund.infrastructure.database import get_db, DatabaseSessionManager  # noqa: E402
from stridefund.api.dependencies import (  # noqa: E402
    get_campaign_service, get_challenge_service, get_post_service,
    get_user_service,
)
from stridefund.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def challenge_service(test_db):
    return get_challenge_service(test_db)


@pytest.fixture
def campaign_service(test_db):
    return get_campaign_service(test_db)


@pytest.fixture
def user_service(test_db):
    return get_user_service(test_db)


@pytest.fixture
def post_service(test_db):
    return get_post_service(test_db)


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    previous_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = previous_manager


@pytest.fixture
async def alice(user_service):
    return await user_service.create_user("alice@example.com", "alice", "Alice Runner")


@pytest.fixture
async def bob(user_service):
    return await user_service.create_user("bob@example.com", "bob", "Bob Walker")


@pytest.fixture
async def challenge(challenge_service, alice):
    return await challenge_service.create_challenge(
        alice.id, "Spring Marathon", description="Run for clean water",
        location="Lagos",
    )


@pytest.fixture
async def cause(challenge_service, challenge, alice):
    return await challenge_service.create_cause(
        challenge.id, alice.id, "Clean Water Wells", activity="Running",
    )


@pytest.fixture
async def campaign(campaign_service, alice):
    return await campaign_service.create_campaign(
        alice.id, "Lagos Bridge Run", description="Miles for school books",
        location="Lagos", activity="Running", target_amount=500.0,
    )
