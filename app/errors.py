# app/errors.py


class DocumentsError(Exception):
    """Base class for errors raised while reading documents."""


class StoreUnavailable(DocumentsError):
    """The document store could not be reached or the query failed."""

    def __init__(self, message: str = "Document store unavailable"):
        super().__init__(message)


class Cancelled(DocumentsError):
    """The caller abandoned the read before it completed."""

    def __init__(self, message: str = "Document retrieval cancelled"):
        super().__init__(message)
