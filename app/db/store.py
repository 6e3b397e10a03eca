# app/db/store.py

import logging
from typing import Any, Iterable, Mapping, Protocol, Sequence, Union

from sqlalchemy import select, text
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine

from app.db.schema import documents, metadata
from app.errors import StoreUnavailable
from app.models.documents import DocumentIn

logger = logging.getLogger(__name__)


class DocumentStore(Protocol):
    async def fetch_all(self) -> Sequence[Mapping[str, Any]]:
        """
        Return every document as a mapping with "id" and "name",
        ordered by id ascending. Raises StoreUnavailable on failure.
        """
        ...


class SqlDocumentStore:
    def __init__(self, engine: AsyncEngine):
        self.engine = engine

    async def fetch_all(self) -> Sequence[Mapping[str, Any]]:
        stmt = select(documents.c.id, documents.c.name).order_by(documents.c.id.asc())

        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(stmt)
                rows = result.mappings().all()
        except (SQLAlchemyError, OSError) as e:
            logger.error("Document query failed: %r", e)
            raise StoreUnavailable() from e

        return rows


# ---- Write path (seeding only) ----

def _insert_for(engine: AsyncEngine):
    if engine.dialect.name == "postgresql":
        return pg_insert
    if engine.dialect.name == "sqlite":
        return sqlite_insert
    raise ValueError(f"Unsupported database dialect: {engine.dialect.name}")


async def insert_documents(
    engine: AsyncEngine,
    records: Iterable[Union[DocumentIn, Mapping[str, Any]]],
) -> int:
    """
    Validate and write documents in one transaction.

    Records with an id are upserted by id (name is overwritten);
    records without one get an id assigned by the store.
    Raises pydantic.ValidationError before touching the database
    if any record is invalid.
    """
    validated = [
        r if isinstance(r, DocumentIn) else DocumentIn.model_validate(r)
        for r in records
    ]
    if not validated:
        return 0

    insert = _insert_for(engine)

    async with engine.begin() as conn:
        for doc in validated:
            if doc.id is None:
                await conn.execute(documents.insert().values(name=doc.name))
                continue

            stmt = insert(documents).values(id=doc.id, name=doc.name)
            stmt = stmt.on_conflict_do_update(
                index_elements=[documents.c.id],
                set_={"name": stmt.excluded.name},
            )
            await conn.execute(stmt)

        if engine.dialect.name == "postgresql" and any(d.id is not None for d in validated):
            # explicit ids bypass the serial sequence; move it past them
            await conn.execute(
                text(
                    "SELECT setval(pg_get_serial_sequence('documents', 'id'), "
                    "(SELECT MAX(id) FROM documents))"
                )
            )

    return len(validated)


async def create_schema(engine: AsyncEngine, drop: bool = False) -> None:
    async with engine.begin() as conn:
        if drop:
            await conn.run_sync(metadata.drop_all)
        await conn.run_sync(metadata.create_all)
