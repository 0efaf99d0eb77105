"""Domain model describing a keyword search request."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping, Tuple

from cv_search.domain.errors import ValidationError


@dataclass(frozen=True)
class SearchQuery:
    """Ordered, non-empty set of keywords used to rank stored documents."""

    keywords: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.keywords:
            raise ValidationError("At least one keyword is required.")

    @classmethod
    def from_keywords(cls, keywords: Iterable[str]) -> "SearchQuery":
        """Build a query stripping blanks and case-insensitive duplicates."""

        seen: set[str] = set()
        cleaned: list[str] = []
        for keyword in keywords:
            if not isinstance(keyword, str):
                raise ValidationError("Keywords must be strings.")
            stripped = keyword.strip()
            folded = stripped.casefold()
            if not stripped or folded in seen:
                continue
            seen.add(folded)
            cleaned.append(stripped)
        return cls(keywords=tuple(cleaned))

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SearchQuery":
        """Create a query from a ``{"keywords": [...]}`` payload."""

        if not isinstance(data, Mapping):
            raise ValidationError("Search payload must be a mapping.")

        raw_keywords = data.get("keywords")
        if not isinstance(raw_keywords, list):
            raise ValidationError("Search payload must contain a list of keywords.")
        return cls.from_keywords(raw_keywords)

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation of the query."""
        return {"keywords": list(self.keywords)}
