"""
Documents router package.

Exports the router for document content endpoints.
"""

from .documents_router import router

__all__ = ["router"]
