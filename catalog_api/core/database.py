from typing import AsyncIterator
from fastapi import Request
from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy import event
from catalog_api.core.config import Settings
from catalog_api.core.exceptions import StoreError
import logging

logger = logging.getLogger(__name__)


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured store.

    The engine is owned by the application lifespan; nothing in the package
    keeps a module-level reference to it.
    """
    engine_kwargs = {"echo": settings.log_level == "DEBUG", "future": True}
    if not settings.is_sqlite:
        engine_kwargs["pool_size"] = settings.db_pool_size
        engine_kwargs["max_overflow"] = settings.db_max_overflow

    engine = create_async_engine(settings.database_url, **engine_kwargs)

    if engine.dialect.name == "postgresql":
        # Set search_path to the schema from settings after connecting
        @event.listens_for(engine.sync_engine, "connect")
        def set_search_path(dbapi_connection, connection_record):
            logger.info("Setting search path to %s", settings.db_schema)
            cursor = dbapi_connection.cursor()
            cursor.execute(f"SET search_path TO {settings.db_schema}")
            cursor.close()

    return engine


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def get_async_session(request: Request) -> AsyncIterator[AsyncSession]:
    """FastAPI dependency for getting a database session bound to the app's engine"""
    session_maker = request.app.state.session_maker
    async with session_maker() as session:
        try:
            yield session
        except StoreError as e:
            await session.rollback()
            logger.error(f"Database session error: {e}")
            raise
        finally:
            await session.close()


async def create_db_and_tables(engine: AsyncEngine):
    # Registers the table definitions on SQLModel.metadata
    import catalog_api.models  # noqa: F401

    logger.info("Creating database tables")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def close_db(engine: AsyncEngine):
    await engine.dispose()
