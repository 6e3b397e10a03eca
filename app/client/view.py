# app/client/view.py

import logging
from dataclasses import dataclass
from html import escape
from typing import Tuple, Union

from app.client.api import DocumentsClient, DocumentsRequestError
from app.models.documents import DocumentDto

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Loading:
    pass


@dataclass(frozen=True)
class Loaded:
    documents: Tuple[DocumentDto, ...]


@dataclass(frozen=True)
class Failed:
    message: str


ViewState = Union[Loading, Loaded, Failed]


class DocumentsView:
    """
    Holds the documents list UI state and drives the load cycle.

    Each load gets a generation number; a response only lands if its
    generation is still the latest, so an older request can never
    overwrite the result of a newer one.
    """

    def __init__(self, client: DocumentsClient):
        self.client = client
        self.state: ViewState = Loading()
        self._generation = 0

    async def mount(self) -> ViewState:
        return await self.load()

    async def retry(self) -> ViewState:
        return await self.load()

    async def load(self) -> ViewState:
        self._generation += 1
        generation = self._generation
        self.state = Loading()

        try:
            documents = await self.client.get_documents()
        except DocumentsRequestError as e:
            outcome: ViewState = Failed(f"Failed to load documents: {e}")
        else:
            outcome = Loaded(tuple(documents))

        if generation != self._generation:
            logger.debug(
                "Discarding documents response %d (latest is %d)",
                generation,
                self._generation,
            )
            return self.state

        self.state = outcome
        return outcome

    def render(self) -> str:
        return render_documents(self.state)


def render_documents(state: ViewState) -> str:
    parts = [
        '<h1 data-id="main-heading">your documents</h1>',
        '<section data-id="documents-container">',
        '<h2 data-id="documents-heading">Documents</h2>',
    ]

    if isinstance(state, Loading):
        parts.append('<p data-id="loading-message">Loading documents...</p>')
    elif isinstance(state, Loaded):
        parts.append('<ol data-id="documents-list">')
        for doc in state.documents:
            parts.append(
                f'<li data-id="document-{doc.id}">'
                f"<span>{doc.id}</span> <span>{escape(doc.name)}</span></li>"
            )
        parts.append("</ol>")
    elif isinstance(state, Failed):
        parts.append(f'<p data-id="error-message">{escape(state.message)}</p>')
        parts.append('<button type="button" data-id="retry-button">Retry</button>')
    else:
        raise TypeError(f"Unknown view state: {state!r}")

    parts.append("</section>")
    return "\n".join(parts)
