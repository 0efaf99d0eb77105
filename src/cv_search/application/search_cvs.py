"""Use case ranking stored CV documents against a keyword query."""
from __future__ import annotations

import logging
from typing import Iterable, List

from cv_search.domain.models.cv_document import CvDocument
from cv_search.domain.models.search_query import SearchQuery
from cv_search.domain.repositories.document_repository import DocumentRepository
from cv_search.domain.services.keyword_ranker import search_documents

logger = logging.getLogger(__name__)


class SearchDocumentsUseCase:
    """Rank a snapshot of the repository by keyword occurrences.

    Only ranked search is performed here: an empty keyword set raises
    ``ValidationError``. Callers wanting every document use
    ``ListDocumentsUseCase`` instead.
    """

    def __init__(self, repository: DocumentRepository) -> None:
        """Initialize the use case with the repository it reads from."""

        self._repository = repository

    def execute(self, keywords: Iterable[str]) -> List[CvDocument]:
        """Return the documents matching ``keywords`` ordered by score."""

        query = SearchQuery.from_keywords(keywords)
        return self.execute_query(query)

    def execute_query(self, query: SearchQuery) -> List[CvDocument]:
        """Return the documents matching an already validated ``query``."""

        snapshot = self._repository.list_all()
        results = search_documents(snapshot, query)
        logger.info(
            "Search for %d keywords matched %d of %d documents",
            len(query.keywords),
            len(results),
            len(snapshot),
        )
        return results
