"""Document store protocol consumed by the tools."""

from typing import Protocol

from docsbot.store.models import LibrarySummary, StoreSearchResult


class DocumentStoreError(Exception):
    """Raised when the document store cannot serve a request."""


class DocumentStore(Protocol):
    """
    Capability of a document management service.

    Scoring, indexing and persistence all live behind this interface.
    """

    async def list_libraries(self) -> list[LibrarySummary]:
        ...

    async def search_store(
        self,
        library: str,
        version: str | None,
        query: str,
        limit: int,
    ) -> list[StoreSearchResult]:
        ...
