"""Library suggestion tool."""

from __future__ import annotations

import json
from typing import Any

from docsbot.agent.tools.base import Tool
from docsbot.agent.tools.errors import ToolError
from docsbot.agent.tools.suggest.service import LibrarySuggester
from docsbot.config.schema import MAX_MAX_LIBRARIES, MIN_MAX_LIBRARIES, SuggestLibrariesConfig
from docsbot.store.base import DocumentStore


class SuggestLibrariesTool(Tool):
    """Suggest which indexed libraries are worth searching for a query."""

    name = "suggest_libraries"
    description = (
        "Rank indexed documentation libraries by relevance to a query. "
        "Use before a detailed search to narrow down which libraries to look at."
    )
    parameters = {
        "type": "object",
        "properties": {
            "query": {
                "type": "string",
                "description": "What you are looking for, in plain words",
                "minLength": 1,
            },
            "max_libraries": {
                "type": "integer",
                "minimum": MIN_MAX_LIBRARIES,
                "maximum": MAX_MAX_LIBRARIES,
                "description": "Maximum number of libraries to return (default 5)",
            },
        },
        "required": ["query"],
    }

    def __init__(
        self,
        store: DocumentStore,
        suggest_config: SuggestLibrariesConfig | None = None,
        suggester: LibrarySuggester | None = None,
    ):
        config = suggest_config or SuggestLibrariesConfig()
        self._suggester = suggester or LibrarySuggester(
            store,
            default_max_libraries=config.default_max_libraries,
            results_per_library=config.results_per_library,
            snippet_length=config.snippet_length,
            search_timeout=config.search_timeout,
        )

    async def execute(self, query: str, max_libraries: int | None = None, **kwargs: Any) -> str:
        try:
            result = await self._suggester.suggest(query, max_libraries)
        except ToolError as e:
            return f"Error: {e}"
        return json.dumps(result.to_dict(), ensure_ascii=False)
