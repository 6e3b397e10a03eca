# app/client/api.py

from typing import List

import httpx
from pydantic import TypeAdapter, ValidationError

from app.errors import DocumentsError
from app.models.documents import DocumentDto

DOCUMENTS_PATH = "/api/documents"

_documents_adapter = TypeAdapter(List[DocumentDto])


class DocumentsRequestError(DocumentsError):
    """The documents request failed (network error or non-2xx status)."""


class MalformedResponse(DocumentsRequestError):
    """The response body is not a JSON list of {id, name} objects."""


class DocumentsClient:
    """
    Thin wrapper over an httpx.AsyncClient pointed at the documents API.
    The caller owns the httpx client (base_url, timeouts, transport).
    """

    def __init__(self, http: httpx.AsyncClient):
        self.http = http

    async def get_documents(self) -> List[DocumentDto]:
        try:
            response = await self.http.get(DOCUMENTS_PATH)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as e:
            raise DocumentsRequestError(str(e) or e.__class__.__name__) from e

        if not response.is_success:
            raise DocumentsRequestError(
                f"HTTP {response.status_code} {response.reason_phrase}".strip()
            )

        try:
            return _documents_adapter.validate_json(response.content)
        except ValidationError as e:
            raise MalformedResponse(
                f"unexpected response body ({e.error_count()} errors)"
            ) from e
