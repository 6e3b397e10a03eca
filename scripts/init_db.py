import asyncio

from app.db.engine import dispose_engine, get_engine
from app.db.store import create_schema


async def _init() -> None:
    try:
        await create_schema(get_engine(), drop=True)
    finally:
        await dispose_engine()


def main():
    asyncio.run(_init())
    print("DB schema created.")

if __name__ == "__main__":
    main()
