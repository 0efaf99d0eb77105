"""Repository implementation keeping CV documents in process memory."""
from __future__ import annotations

import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Sequence

from cv_search.domain.models.cv_document import CvDocument, DocumentCandidate
from cv_search.domain.repositories.document_repository import DocumentRepository

logger = logging.getLogger(__name__)

FIRST_DOCUMENT_ID = 1


def utc_now() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


class InMemoryDocumentRepository(DocumentRepository):
    """Store documents in a dictionary guarded by a lock."""

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        """Initialize an empty repository using ``clock`` for upload timestamps."""

        self._clock = clock
        self._lock = threading.Lock()
        self._documents: Dict[int, CvDocument] = {}
        self._next_id = FIRST_DOCUMENT_ID

    def insert_many(self, candidates: Sequence[DocumentCandidate]) -> List[CvDocument]:
        """Assign consecutive ids, stamp the upload time and store every document."""

        with self._lock:
            uploaded_at = self._clock()
            documents = []
            for candidate in candidates:
                document = CvDocument.from_candidate(
                    candidate, document_id=self._next_id, uploaded_at=uploaded_at
                )
                self._documents[document.id] = document
                self._next_id += 1
                documents.append(document)
        for document in documents:
            logger.info("Stored document %d (%s)", document.id, document.filename)
        return documents

    def list_all(self) -> List[CvDocument]:
        """Return a copy of the stored documents in insertion order."""

        with self._lock:
            return list(self._documents.values())

    def clear_all(self) -> None:
        """Drop every document and restart ids at the first value."""

        with self._lock:
            removed = len(self._documents)
            self._documents.clear()
            self._next_id = FIRST_DOCUMENT_ID
        logger.info("Cleared %d documents from memory", removed)
