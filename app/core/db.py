from collections.abc import AsyncGenerator
from urllib.parse import parse_qs, urlencode, urlparse, urlunparse

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlmodel import SQLModel

import app.models  # noqa: F401 - register tables on SQLModel.metadata


def to_async_url(database_url: str) -> tuple[str, dict]:
    """Return (async url, connect_args) for a configured database URL.

    asyncpg does not accept psycopg params like sslmode/channel_binding, so the
    scheme is converted, those params are stripped and SSL moves to connect_args.
    """
    parsed = urlparse(database_url)
    if parsed.scheme not in ("postgresql", "postgres"):
        return database_url, {}
    query = parse_qs(parsed.query, keep_blank_values=True)
    sslmode = query.pop("sslmode", [None])[0]
    query.pop("channel_binding", None)
    new_query = urlencode(query, doseq=True)
    url = urlunparse(("postgresql+asyncpg", parsed.netloc, parsed.path, parsed.params, new_query, parsed.fragment))
    connect_args = {"ssl": True} if sslmode and sslmode != "disable" else {}
    return url, connect_args


class Database:
    """Engine and session factory for one process.

    Constructed once by the app factory; `dispose()` runs at shutdown.
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        url, connect_args = to_async_url(database_url)
        engine_kwargs: dict = {"echo": echo, "connect_args": connect_args}
        if not url.startswith("sqlite"):
            engine_kwargs.update(pool_pre_ping=True, pool_size=5, max_overflow=10)
        self.url = url
        self.engine: AsyncEngine = create_async_engine(url, **engine_kwargs)
        self.session_maker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create tables if missing; prefer Alembic in production."""
        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    database: Database = request.app.state.db
    async with database.session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
