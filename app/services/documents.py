# app/services/documents.py

import asyncio
import logging
from typing import List, Optional

from app.db.store import DocumentStore
from app.errors import Cancelled
from app.models.documents import DocumentDto

logger = logging.getLogger(__name__)


class DocumentsService:
    """
    Reads every document from the store and maps it to its wire form.
    Stateless between calls; never retries.
    """

    def __init__(self, store: DocumentStore):
        self.store = store

    async def get_documents(
        self, cancel_event: Optional[asyncio.Event] = None
    ) -> List[DocumentDto]:
        """
        Return all documents ordered by id ascending (possibly empty).

        Raises StoreUnavailable if the store fails and Cancelled if
        cancel_event is set before the query completes.
        """
        if cancel_event is None:
            rows = await self.store.fetch_all()
        else:
            rows = await _run_until_cancelled(self.store.fetch_all(), cancel_event)

        return [DocumentDto(id=row["id"], name=row["name"]) for row in rows]


async def _run_until_cancelled(coro, cancel_event: asyncio.Event):
    if cancel_event.is_set():
        coro.close()
        raise Cancelled()

    query = asyncio.ensure_future(coro)
    waiter = asyncio.ensure_future(cancel_event.wait())

    try:
        await asyncio.wait({query, waiter}, return_when=asyncio.FIRST_COMPLETED)
    except asyncio.CancelledError:
        query.cancel()
        raise
    finally:
        waiter.cancel()

    if query.done():
        return query.result()

    query.cancel()
    # let the store release its connection before reporting
    await asyncio.wait({query})
    if not query.cancelled():
        query.exception()

    logger.info("Document query cancelled by caller")
    raise Cancelled()
