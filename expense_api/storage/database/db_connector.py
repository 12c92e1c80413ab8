from collections.abc import AsyncGenerator, Callable
from typing import Any, Dict

from sqlalchemy import event
from sqlalchemy.engine.url import URL
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from expense_api.core.logger import logger
from expense_api.core.settings import Settings, SchemaMode
from expense_api.v1_0.models import Base

SessionDependency = Callable[[], AsyncGenerator[AsyncSession, None]]


def build_engine(settings: Settings) -> AsyncEngine:
    url: URL = settings.SQLALCHEMY_URL
    echo = bool(getattr(settings, "DEBUG", False))

    if url.get_backend_name() == "sqlite":
        engine = create_async_engine(url, echo=echo)

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        return engine

    connect_args: Dict[str, Any] = {}
    if settings.DB_SSL:
        connect_args["ssl"] = True
    return create_async_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        execution_options={"isolation_level": "READ COMMITTED"},
        connect_args=connect_args,
    )


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False, autoflush=False, class_=AsyncSession)


def session_dependency(session_factory: async_sessionmaker[AsyncSession]) -> SessionDependency:
    """FastAPI dependency yielding one session per request."""

    async def get_db() -> AsyncGenerator[AsyncSession, None]:
        session: AsyncSession = session_factory()
        try:
            yield session
        finally:
            await session.close()

    return get_db


async def apply_schema_mode(engine: AsyncEngine, mode: SchemaMode) -> None:
    if mode == "none":
        return
    async with engine.begin() as conn:
        if mode == "create-drop":
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    logger.info("[DB] schema mode=%s applied", mode)


async def drop_schema(engine: AsyncEngine) -> None:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    logger.info("[DB] schema dropped")


async def dispose_engine(engine: AsyncEngine) -> None:
    await engine.dispose()
