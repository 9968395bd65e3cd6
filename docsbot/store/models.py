"""Shared document store models."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any


def _coerce_score(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        score = float(value)
        return score if math.isfinite(score) else None
    return None


@dataclass(slots=True)
class LibrarySummary:
    """Indexed library as reported by the store."""

    library: str
    versions: list[Any] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LibrarySummary":
        if not isinstance(data, dict):
            raise ValueError("library summary must be an object")
        name = str(data.get("library", "")).strip()
        if not name:
            raise ValueError("library name is required")
        versions = data.get("versions") or []
        if not isinstance(versions, list):
            raise ValueError(f"versions must be an array for library {name}")
        return cls(library=name, versions=list(versions))


@dataclass(slots=True)
class StoreSearchResult:
    """Single search hit returned by the store. A missing score counts as zero."""

    content: str
    score: float | None = None
    url: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StoreSearchResult":
        if not isinstance(data, dict):
            raise ValueError("search result must be an object")
        return cls(
            content=str(data.get("content") or ""),
            score=_coerce_score(data.get("score")),
            url=str(data.get("url") or ""),
        )
