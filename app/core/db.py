from contextlib import asynccontextmanager
from typing import AsyncIterator
from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from .base import Base


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """Owns the engine and session factory for one process.

    Created by the application entry point at startup and disposed at shutdown;
    request handlers reach it through ``request.app.state.db``.
    """

    def __init__(self, dsn: str, echo: bool = False):
        self.dsn = dsn
        self.engine = create_async_engine(dsn, echo=echo, pool_pre_ping=True)
        if self.engine.dialect.name == "sqlite":
            # SQLite only enforces REFERENCES clauses when asked to, per connection
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        self.sessionmaker = async_sessionmaker(self.engine, expire_on_commit=False, class_=AsyncSession)

    async def create_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_all(self):
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self):
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        async with self.sessionmaker() as session:
            yield session


async def init_models(db: Database, manage: str):
    # In "create_all" mode tables are created on startup; otherwise the schema is managed outside the app.
    if manage == "create_all":
        # register every model on Base.metadata before creating tables
        from app.modules import models_registry  # noqa: F401
        await db.create_all()


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    db: Database = request.app.state.db
    async with db.session() as session:
        yield session
