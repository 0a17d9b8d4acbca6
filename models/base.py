"""
base.py - SQLAlchemy async engine, session setup and one-time schema creation
"""
import asyncio
import logging

from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from config import DATABASE_URL

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    pass


_engine_kwargs = {"echo": False}
if DATABASE_URL.startswith("sqlite"):
    # aiosqlite connections are cheap; don't share them across event loops
    _engine_kwargs["poolclass"] = NullPool

_engine = create_async_engine(DATABASE_URL, **_engine_kwargs)

async_session_factory = async_sessionmaker(
    _engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

# database URL -> schema creation future, shared by concurrent first callers
_init_futures: dict[str, asyncio.Future] = {}


async def get_db():
    """FastAPI dependency for async DB session."""
    async with async_session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def _create_all() -> None:
    from . import road_models  # noqa: F401
    async with _engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready on %s", _engine.url.render_as_string(hide_password=True))


async def init_db() -> None:
    """Create all tables, once per process and database URL."""
    key = str(_engine.url)
    future = _init_futures.get(key)
    if future is None:
        future = asyncio.ensure_future(_create_all())
        _init_futures[key] = future
    try:
        await future
    except Exception:
        _init_futures.pop(key, None)
        raise
