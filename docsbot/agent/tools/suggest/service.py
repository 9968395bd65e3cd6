"""
Library relevance ranking.

Runs a small search against every indexed library in parallel and ranks the
libraries by the best score each one returns. Scoring itself belongs to the
document store; this module only fans out, reduces and sorts.
"""

from __future__ import annotations

import asyncio
import math
from typing import Any

from loguru import logger

from docsbot.agent.tools.errors import InvalidArgumentError
from docsbot.agent.tools.suggest.models import LibrarySuggestion, SuggestLibrariesResult
from docsbot.config.schema import MAX_MAX_LIBRARIES, MIN_MAX_LIBRARIES
from docsbot.store.base import DocumentStore
from docsbot.store.models import StoreSearchResult

DEFAULT_MAX_LIBRARIES = 5
RESULTS_PER_LIBRARY = 3
SNIPPET_LENGTH = 200


class LibrarySuggester:
    """Rank indexed libraries by relevance to a free-text query."""

    def __init__(
        self,
        store: DocumentStore,
        *,
        default_max_libraries: int = DEFAULT_MAX_LIBRARIES,
        results_per_library: int = RESULTS_PER_LIBRARY,
        snippet_length: int = SNIPPET_LENGTH,
        search_timeout: float | None = None,
    ):
        self._store = store
        self.default_max_libraries = default_max_libraries
        self.results_per_library = results_per_library
        self.snippet_length = snippet_length
        self.search_timeout = search_timeout

    async def suggest(self, query: str, max_libraries: int | None = None) -> SuggestLibrariesResult:
        """
        Suggest the libraries most relevant to ``query``.

        Args:
            query: Free-text query; must not be blank.
            max_libraries: Maximum number of suggestions, 1..20.

        Returns:
            Suggestions with score > 0, best first. Libraries whose search
            fails are left out rather than failing the whole call.

        Raises:
            InvalidArgumentError: If ``query`` or ``max_libraries`` is invalid.
        """
        query, limit = self._validate(query, max_libraries)

        logger.info("Suggesting libraries for query: {!r}", query)

        libraries = await self._store.list_libraries()
        if not libraries:
            logger.warning("No libraries indexed yet.")
            return SuggestLibrariesResult()

        logger.debug("Evaluating {} libraries", len(libraries))

        # gather keeps listing order, so the stable sort below breaks ties by it
        scored = await asyncio.gather(*(self._score_library(lib.library, query) for lib in libraries))
        ranked = sorted(
            (item for item in scored if item.score > 0),
            key=lambda item: item.score,
            reverse=True,
        )[:limit]

        logger.info("Found {} relevant libraries (from {} total)", len(ranked), len(libraries))
        return SuggestLibrariesResult(libraries=ranked)

    def _validate(self, query: Any, max_libraries: Any) -> tuple[str, int]:
        if not isinstance(query, str) or not query.strip():
            raise InvalidArgumentError(
                "query required: must be a non-empty string",
                self.__class__.__name__,
            )

        if max_libraries is None:
            max_libraries = self.default_max_libraries
        if (
            not isinstance(max_libraries, int)
            or isinstance(max_libraries, bool)
            or not MIN_MAX_LIBRARIES <= max_libraries <= MAX_MAX_LIBRARIES
        ):
            raise InvalidArgumentError(
                f"max_libraries out of range: must be an integer between "
                f"{MIN_MAX_LIBRARIES} and {MAX_MAX_LIBRARIES}",
                self.__class__.__name__,
            )
        return query, max_libraries

    async def _score_library(self, library: str, query: str) -> LibrarySuggestion:
        try:
            search = self._store.search_store(library, None, query, self.results_per_library)
            if self.search_timeout is not None:
                results = await asyncio.wait_for(search, timeout=self.search_timeout)
            else:
                results = await search
        except Exception as e:
            # library may have no valid version or no searchable content
            logger.debug("Skipping {}: {}", library, str(e) or type(e).__name__)
            return LibrarySuggestion(name=library, score=0)

        return self._reduce(library, results)

    def _reduce(self, library: str, results: list[StoreSearchResult]) -> LibrarySuggestion:
        best: StoreSearchResult | None = None
        for result in results:
            if result.score is None or not math.isfinite(result.score):
                continue
            if best is None or result.score > best.score:
                best = result

        if best is None or best.score <= 0:
            return LibrarySuggestion(name=library, score=0)

        return LibrarySuggestion(
            name=library,
            score=best.score,
            matched_content=(best.content or "")[: self.snippet_length],
        )
