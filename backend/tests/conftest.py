"""
FinEdge - Test Configuration
Shared fixtures and test configuration.
"""
import os
import sys
import tempfile
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio

# Add backend to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# Set test environment before any finedge import builds settings/engine
_TEST_DB_DIR = Path(tempfile.mkdtemp(prefix="finedge-tests-"))
TEST_DB_PATH = _TEST_DB_DIR / "app.db"

os.environ["APP_ENV"] = "testing"
os.environ["SECRET_KEY"] = "test-secret-key-for-testing"
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["LOG_TO_FILE"] = "false"
os.environ["LOG_LEVEL"] = "WARNING"


# =========================
# Quote Fixtures
# =========================

@pytest.fixture
def quote_provider():
    """Static provider with the default market snapshot."""
    from finedge.data_providers.static_provider import StaticQuoteProvider
    return StaticQuoteProvider()


@pytest.fixture
def synthetic():
    """Seeded generator with a fixed clock."""
    from finedge.services.synthetic_data import SyntheticDataGenerator
    return SyntheticDataGenerator(seed=42, clock=lambda: datetime(2024, 6, 15, 12, 0))


# =========================
# User Fixtures
# =========================

@pytest.fixture
def sample_user_data() -> dict:
    """Sample registration payload (camelCase, as sent by the client)."""
    return {
        "username": "testuser",
        "password": "SecurePassword123!",
        "firstName": "Test",
        "lastName": "User",
        "email": "test@example.com",
    }


@pytest.fixture
def sample_user():
    """Sample user object mock."""
    from finedge.db.models.user import User, UserRole
    user = MagicMock(spec=User)
    user.id = 1
    user.username = "testuser"
    user.hashed_password = "$2b$12$test_hashed_password"
    user.first_name = "Test"
    user.last_name = "User"
    user.email = "test@example.com"
    user.role = UserRole.USER
    user.is_admin = False
    user.created_at = datetime.now(timezone.utc)
    return user


# =========================
# Database Fixtures
# =========================

@pytest.fixture
def mock_db_session():
    """Mock async database session."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.flush = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_session(tmp_path):
    """
    Real AsyncSession on a throwaway SQLite file.

    Each test gets its own database with all tables created.
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import NullPool

    from finedge.db.database import Base
    import finedge.db.models  # noqa: F401

    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_maker() as session:
        yield session

    await engine.dispose()


@pytest_asyncio.fixture
async def trader(db_session):
    """Registered user with a freshly seeded portfolio."""
    from finedge.config import settings
    from finedge.db.repositories.portfolio import PortfolioRepository
    from finedge.db.repositories.user import UserRepository
    from finedge.schemas.user import UserCreate

    user = await UserRepository(db_session).create(UserCreate(username="trader", password="secret"))
    await PortfolioRepository(db_session).create(user.id, settings.INITIAL_DEPOSIT)
    await db_session.commit()
    # Detach so a rollback inside the code under test cannot expire it
    # (expired attributes would trigger sync lazy loads on an async session)
    db_session.expunge(user)
    return user


@pytest.fixture
def cash_of(db_session):
    """Read a user's current cash balance from the database."""
    from finedge.db.repositories.portfolio import PortfolioRepository

    async def _cash(user_id: int) -> Decimal:
        portfolio = await PortfolioRepository(db_session).get_by_user(user_id)
        return Decimal(portfolio.cash_balance)

    return _cash


# =========================
# API Fixtures
# =========================

@pytest.fixture
def client(synthetic):
    """
    TestClient over the real application.

    Tables of the shared test database are recreated for every test.
    """
    from fastapi.testclient import TestClient
    from sqlalchemy import create_engine

    from finedge.db.database import Base
    from finedge.dependencies import get_synthetic_data
    from finedge.main import app
    import finedge.db.models  # noqa: F401

    sync_engine = create_engine(f"sqlite:///{TEST_DB_PATH}")
    Base.metadata.drop_all(sync_engine)
    Base.metadata.create_all(sync_engine)
    sync_engine.dispose()

    app.dependency_overrides[get_synthetic_data] = lambda: synthetic
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def register(client, sample_user_data):
    """Register a user and return its auth headers."""

    def _register(**overrides) -> dict:
        payload = {**sample_user_data, **overrides}
        response = client.post("/api/register", json=payload)
        assert response.status_code == 201, response.text
        return {"Authorization": f"Bearer {response.json()['accessToken']}"}

    return _register


@pytest.fixture
def auth_headers(register) -> dict:
    return register()
