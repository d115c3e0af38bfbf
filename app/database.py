# app/database.py
import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base

logger = logging.getLogger(__name__)

# Base declarative
Base = declarative_base()


def create_store(database_url: str, echo: bool = False):
    """Build the engine and session factory for one store URL."""
    engine = create_async_engine(database_url, echo=echo, future=True)
    session_maker = sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    return engine, session_maker


async def init_store(engine: AsyncEngine) -> bool:
    """Create the products table if missing.

    A store that cannot be opened is logged and reported as False; the
    service keeps running and individual requests fail with 500 instead.
    """
    # models must be imported so the table is registered on Base.metadata
    from . import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as exc:
        logger.error("Error al abrir la base de datos: %s", getattr(exc, "orig", None) or exc)
        return False
    logger.info("Tabla 'products' lista (%s)", engine.url.render_as_string(hide_password=True))
    return True


async def get_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    async with request.app.state.session_maker() as session:
        yield session
