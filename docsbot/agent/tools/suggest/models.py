"""Models for library suggestion results."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class LibrarySuggestion:
    """Library ranked by its best search score for a query."""

    name: str
    score: float
    matched_content: str | None = None

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"name": self.name, "score": self.score}
        if self.matched_content is not None:
            payload["matchedContent"] = self.matched_content
        return payload


@dataclass(slots=True)
class SuggestLibrariesResult:
    """Suggestions sorted by descending score."""

    libraries: list[LibrarySuggestion] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"libraries": [item.to_dict() for item in self.libraries]}
