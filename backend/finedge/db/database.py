"""
FinEdge - Database Connection
"""
from datetime import datetime, timezone
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import NullPool
from loguru import logger

from finedge.config import settings


def _engine_options(url: str) -> dict:
    """Pool settings per backend. SQLite connections are opened per checkout."""
    if url.startswith("sqlite"):
        return {"poolclass": NullPool}
    return {
        "pool_pre_ping": True,
        "pool_size": 10,
        "max_overflow": 20,
    }


# Create async engine
engine = create_async_engine(
    settings.database_url,
    echo=settings.DATABASE_ECHO,
    **_engine_options(settings.database_url),
)

# Create async session factory
async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autocommit=False,
    autoflush=False,
)

# Base class for models
Base = declarative_base()


def utc_now() -> datetime:
    """Timezone-aware current UTC time for timestamp columns."""
    return datetime.now(timezone.utc)


async def init_db():
    """Initialize database tables."""
    async with engine.begin() as conn:
        # Import all models here to ensure they're registered
        from finedge.db.models import user, portfolio, transaction, watchlist  # noqa: F401

        await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created/verified")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Dependency for getting database session."""
    async with async_session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
