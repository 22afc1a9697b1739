"""
Identity database access.
Wraps a SQLAlchemy async engine and session factory behind a small handle
that the application owns for its lifetime.
"""
from contextlib import asynccontextmanager
from typing import AsyncIterator
import logging

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

logger = logging.getLogger(__name__)

Base = declarative_base()

class IdentityStore:
    """Connected handle to the identity database."""

    def __init__(self, engine: AsyncEngine):
        self._engine = engine
        self._sessionmaker = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

    @classmethod
    def open(cls, url, **engine_options) -> "IdentityStore":
        """
        Bind a new store to the given database URL.
        Engine options are handed to create_async_engine untouched, and any
        error it raises for bad configuration reaches the caller as-is.
        """
        engine = create_async_engine(url, **engine_options)
        store = cls(engine)
        logger.info(f"Identity store opened: {store.url}")
        return store

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def url(self) -> str:
        return self._engine.url.render_as_string(hide_password=True)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self._sessionmaker() as session:
            yield session

    async def create_schema(self):
        """Create all identity tables that do not exist yet."""
        # models register themselves on Base when imported
        from models import user  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> bool:
        async with self._engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar() == 1

    async def dispose(self):
        await self._engine.dispose()
        logger.info("Identity store disposed")

def open_identity_store(url, **engine_options) -> IdentityStore:
    return IdentityStore.open(url, **engine_options)
