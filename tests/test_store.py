"""SqlDocumentStore and the seeding write path against a real SQLite file."""

import pytest
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import create_async_engine

from app.db.schema import documents
from app.db.store import SqlDocumentStore, insert_documents
from app.errors import StoreUnavailable
from app.models.documents import DocumentIn


async def test_empty_table_returns_no_rows(engine) -> None:
    assert list(await SqlDocumentStore(engine).fetch_all()) == []


async def test_rows_come_back_ordered_by_id(engine) -> None:
    await insert_documents(
        engine,
        [
            {"id": 30, "name": "c"},
            {"id": 4, "name": "a"},
            {"id": 12, "name": "b"},
        ],
    )

    rows = await SqlDocumentStore(engine).fetch_all()

    assert [(row["id"], row["name"]) for row in rows] == [(4, "a"), (12, "b"), (30, "c")]


async def test_written_document_reads_back_unchanged(engine) -> None:
    await insert_documents(engine, [DocumentIn(id=7, name="Invoice")])

    rows = await SqlDocumentStore(engine).fetch_all()

    assert [dict(row) for row in rows] == [{"id": 7, "name": "Invoice"}]


async def test_store_assigns_ids_when_missing(engine) -> None:
    written = await insert_documents(engine, [{"name": "first"}, {"name": "second"}])

    rows = await SqlDocumentStore(engine).fetch_all()

    assert written == 2
    ids = [row["id"] for row in rows]
    assert len(set(ids)) == 2
    assert [row["name"] for row in rows] == ["first", "second"]


async def test_existing_id_is_overwritten(engine) -> None:
    await insert_documents(engine, [{"id": 1, "name": "old"}])
    await insert_documents(engine, [{"id": 1, "name": "new"}])

    rows = await SqlDocumentStore(engine).fetch_all()

    assert [dict(row) for row in rows] == [{"id": 1, "name": "new"}]


async def test_name_of_200_chars_is_accepted(engine) -> None:
    name = "x" * 200
    await insert_documents(engine, [{"id": 1, "name": name}])

    rows = await SqlDocumentStore(engine).fetch_all()

    assert rows[0]["name"] == name


@pytest.mark.parametrize("name", ["", "   ", "x" * 201])
async def test_invalid_names_are_rejected_before_writing(engine, name) -> None:
    with pytest.raises(ValidationError):
        await insert_documents(engine, [{"id": 1, "name": "ok"}, {"id": 2, "name": name}])

    # nothing from the batch was written
    assert list(await SqlDocumentStore(engine).fetch_all()) == []


async def test_table_rejects_overlong_name(engine) -> None:
    with pytest.raises(IntegrityError):
        async with engine.begin() as conn:
            await conn.execute(documents.insert().values(id=1, name="x" * 201))


async def test_table_rejects_empty_name(engine) -> None:
    with pytest.raises(IntegrityError):
        async with engine.begin() as conn:
            await conn.execute(documents.insert().values(id=1, name=""))


async def test_missing_table_surfaces_as_store_unavailable(tmp_path) -> None:
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.sqlite'}")
    try:
        with pytest.raises(StoreUnavailable):
            await SqlDocumentStore(engine).fetch_all()
    finally:
        await engine.dispose()


async def test_unreachable_database_surfaces_as_store_unavailable(tmp_path) -> None:
    path = tmp_path / "no-such-dir" / "documents.sqlite"
    engine = create_async_engine(f"sqlite+aiosqlite:///{path}")
    try:
        with pytest.raises(StoreUnavailable):
            await SqlDocumentStore(engine).fetch_all()
    finally:
        await engine.dispose()
