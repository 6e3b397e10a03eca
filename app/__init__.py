# app/__init__.py
"""
Documents API: the FastAPI app, its store and the documents client view.

Serve it with:
    uvicorn app:app --reload
"""

from .main import app

__all__ = ["app"]
