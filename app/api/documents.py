# app/api/documents.py

import asyncio
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from app.db.engine import get_engine
from app.db.store import SqlDocumentStore
from app.errors import Cancelled, StoreUnavailable
from app.models.documents import DocumentDto
from app.services.documents import DocumentsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/documents", tags=["documents"])

# nginx's "client closed request"; never seen by the (gone) client
CLIENT_CLOSED_REQUEST = 499

DISCONNECT_POLL_SECONDS = 0.1


def get_documents_service() -> DocumentsService:
    return DocumentsService(SqlDocumentStore(get_engine()))


async def _watch_disconnect(request: Request, cancel_event: asyncio.Event) -> None:
    while not cancel_event.is_set():
        if await request.is_disconnected():
            cancel_event.set()
            return
        await asyncio.sleep(DISCONNECT_POLL_SECONDS)


@router.get("", response_model=List[DocumentDto])
async def list_documents(
    request: Request,
    service: DocumentsService = Depends(get_documents_service),
):
    """
    Return all documents ordered by id ascending.
    """
    cancel_event = asyncio.Event()
    watcher = asyncio.create_task(_watch_disconnect(request, cancel_event))

    try:
        return await service.get_documents(cancel_event)
    except StoreUnavailable as e:
        logger.warning("GET /api/documents -> 503: %s", e)
        raise HTTPException(status_code=503, detail="Document store unavailable")
    except Cancelled:
        logger.info("Client disconnected before documents were returned")
        return Response(status_code=CLIENT_CLOSED_REQUEST)
    finally:
        watcher.cancel()
        await asyncio.wait({watcher})
        if not watcher.cancelled() and watcher.exception() is not None:
            logger.warning("Disconnect watcher failed: %r", watcher.exception())
