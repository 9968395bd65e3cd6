"""Document store collaborators."""

from docsbot.store.base import DocumentStore, DocumentStoreError
from docsbot.store.http import HttpDocumentStore
from docsbot.store.models import LibrarySummary, StoreSearchResult

__all__ = [
    "DocumentStore",
    "DocumentStoreError",
    "HttpDocumentStore",
    "LibrarySummary",
    "StoreSearchResult",
]
