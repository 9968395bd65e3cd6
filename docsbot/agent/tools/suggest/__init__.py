"""Library suggestion tool package."""

from docsbot.agent.tools.suggest.models import LibrarySuggestion, SuggestLibrariesResult
from docsbot.agent.tools.suggest.service import LibrarySuggester
from docsbot.agent.tools.suggest.tool import SuggestLibrariesTool

__all__ = [
    "LibrarySuggester",
    "LibrarySuggestion",
    "SuggestLibrariesResult",
    "SuggestLibrariesTool",
]
