# app/db/engine.py

from functools import lru_cache

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from app.settings import get_settings


@lru_cache
def get_engine() -> AsyncEngine:
    # one engine (and pool) per process; DATABASE_ECHO=true prints SQL
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        echo=settings.database_echo,
    )


async def dispose_engine() -> None:
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
        get_engine.cache_clear()
