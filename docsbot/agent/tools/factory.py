"""Tool registry factory."""

from docsbot.agent.tools.registry import ToolRegistry
from docsbot.agent.tools.suggest import SuggestLibrariesTool
from docsbot.config.schema import Config
from docsbot.store.base import DocumentStore
from docsbot.store.http import HttpDocumentStore


def build_tool_registry(
    *,
    config: Config | None = None,
    store: DocumentStore | None = None,
) -> ToolRegistry:
    """Build a tool registry; the store defaults to the configured HTTP service."""
    config = config or Config()
    store = store or HttpDocumentStore(config.store)

    registry = ToolRegistry()
    suggest_config = config.tools.suggest_libraries
    if suggest_config.enabled:
        registry.register(SuggestLibrariesTool(store=store, suggest_config=suggest_config))
    return registry
