"""Keyword occurrence scoring used to rank stored CV documents."""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence

from cv_search.domain.models.cv_document import CvDocument
from cv_search.domain.models.search_query import SearchQuery


@dataclass(frozen=True)
class ScoredDocument:
    """Pair a document with the number of keyword occurrences found in it."""

    document: CvDocument
    score: int


def count_occurrences(text: str, keyword: str) -> int:
    """Return the non-overlapping, case-insensitive literal matches of ``keyword``."""

    if not keyword:
        return 0
    pattern = re.compile(re.escape(keyword), re.IGNORECASE)
    return sum(1 for _ in pattern.finditer(text))


def score_document(document: CvDocument, keywords: Sequence[str]) -> int:
    """Sum the occurrences of every keyword inside the document text."""

    return sum(count_occurrences(document.extracted_text, keyword) for keyword in keywords)


def rank_documents(
    documents: Iterable[CvDocument], query: SearchQuery
) -> List[ScoredDocument]:
    """Score ``documents`` against ``query`` keeping only matches.

    Results are ordered by score descending; equal scores keep ascending id
    order so repeated searches over the same snapshot are reproducible.
    """

    scored = [
        ScoredDocument(document=document, score=score_document(document, query.keywords))
        for document in documents
    ]
    matches = [entry for entry in scored if entry.score > 0]
    matches.sort(key=lambda entry: (-entry.score, entry.document.id))
    return matches


def search_documents(
    documents: Iterable[CvDocument], query: SearchQuery
) -> List[CvDocument]:
    """Return the ranked documents matching ``query`` without their scores."""

    return [entry.document for entry in rank_documents(documents, query)]
