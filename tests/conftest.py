"""Shared fixtures: an in-memory document store, the ASGI client, a SQLite engine."""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine

from app.api.documents import get_documents_service
from app.db.store import create_schema
from app.errors import StoreUnavailable
from app.main import app
from app.services.documents import DocumentsService


class FakeDocumentStore:
    """DocumentStore kept in memory; can be told to fail or to block."""

    def __init__(self, rows=None):
        self.rows = list(rows or [])
        self.fail = False
        self.calls = 0
        self.release = None
        self.cancelled = False

    async def fetch_all(self):
        self.calls += 1
        if self.fail:
            raise StoreUnavailable()
        if self.release is not None:
            try:
                await self.release.wait()
            except asyncio.CancelledError:
                self.cancelled = True
                raise
        return sorted(self.rows, key=lambda row: row["id"])


@pytest.fixture
def fake_store() -> FakeDocumentStore:
    return FakeDocumentStore(
        [
            {"id": 1, "name": "Document 1"},
            {"id": 2, "name": "Document 2"},
            {"id": 3, "name": "Document 3"},
        ]
    )


@pytest.fixture
async def client(fake_store: FakeDocumentStore):
    """Async HTTP client against the app, with the store swapped for the fake."""
    app.dependency_overrides[get_documents_service] = lambda: DocumentsService(fake_store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def engine(tmp_path):
    """Async SQLite engine on a throwaway file with the schema created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'documents.sqlite'}")
    await create_schema(engine)
    yield engine
    await engine.dispose()
