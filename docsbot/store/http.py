"""HTTP adapter for a remote document management service."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import httpx

from docsbot.store.base import DocumentStoreError
from docsbot.store.models import LibrarySummary, StoreSearchResult

if TYPE_CHECKING:
    from docsbot.config.schema import StoreConfig


class HttpDocumentStore:
    """
    Document store backed by the service's tRPC-style HTTP API.

    Each procedure is queried with ``GET {base_url}/{procedure}?input=<json>``
    and answers with a ``{"result": {"data": ...}}`` envelope.
    """

    def __init__(self, config: "StoreConfig | None" = None):
        from docsbot.config.schema import StoreConfig

        self.config = config or StoreConfig()

    async def list_libraries(self) -> list[LibrarySummary]:
        data = await self._query("listLibraries")
        if not isinstance(data, list):
            raise DocumentStoreError("listLibraries returned a non-list payload")
        try:
            return [LibrarySummary.from_dict(item) for item in data]
        except ValueError as e:
            raise DocumentStoreError(f"listLibraries returned an invalid item: {e}") from e

    async def search_store(
        self,
        library: str,
        version: str | None,
        query: str,
        limit: int,
    ) -> list[StoreSearchResult]:
        data = await self._query(
            "searchStore",
            {"library": library, "version": version, "query": query, "limit": limit},
        )
        if not isinstance(data, list):
            raise DocumentStoreError(f"searchStore returned a non-list payload for {library}")
        try:
            return [StoreSearchResult.from_dict(item) for item in data]
        except ValueError as e:
            raise DocumentStoreError(f"searchStore returned an invalid item for {library}: {e}") from e

    async def _query(self, procedure: str, payload: dict[str, Any] | None = None) -> Any:
        url = f"{self.config.base_url.rstrip('/')}/{procedure}"
        params = {"input": json.dumps(payload)} if payload is not None else None
        headers = {"Accept": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url,
                    params=params,
                    headers=headers,
                    timeout=self.config.timeout,
                )
                response.raise_for_status()
            body = response.json()
        except Exception as e:
            raise DocumentStoreError(f"{procedure} request failed: {e}") from e

        return self._unwrap(procedure, body)

    @staticmethod
    def _unwrap(procedure: str, body: Any) -> Any:
        if not isinstance(body, dict):
            raise DocumentStoreError(f"{procedure} returned a malformed response")
        if "error" in body:
            error = body["error"]
            message = error.get("message") if isinstance(error, dict) else error
            raise DocumentStoreError(f"{procedure} failed: {message}")

        result = body.get("result")
        if not isinstance(result, dict) or "data" not in result:
            raise DocumentStoreError(f"{procedure} response has no result data")
        data = result["data"]
        # superjson-encoded servers nest the payload one level deeper
        if isinstance(data, dict) and "json" in data:
            data = data["json"]
        return data
