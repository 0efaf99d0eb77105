"""Repository implementation that stores CV documents in a JSON file."""
from __future__ import annotations

import json
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, List, Sequence, Tuple

from cv_search.domain.errors import StorageError
from cv_search.domain.models.cv_document import CvDocument, DocumentCandidate
from cv_search.domain.repositories.document_repository import DocumentRepository
from cv_search.infrastructure.repositories.in_memory_document_repository import (
    FIRST_DOCUMENT_ID,
    utc_now,
)

logger = logging.getLogger(__name__)


class JsonDocumentRepository(DocumentRepository):
    """Persist documents and the id counter inside a single JSON file on disk."""

    def __init__(
        self, file_path: Path, clock: Callable[[], datetime] = utc_now
    ) -> None:
        """Initialize the repository with the path where data will be stored."""

        self._file_path = file_path
        self._clock = clock
        self._lock = threading.Lock()
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as error:
            raise StorageError(
                f"Could not create the storage directory {self._file_path.parent}."
            ) from error

    def insert_many(self, candidates: Sequence[DocumentCandidate]) -> List[CvDocument]:
        """Persist every candidate with one write, using the ids stored in the file."""

        with self._lock:
            next_id, documents = self._read()
            uploaded_at = self._clock()
            inserted = [
                CvDocument.from_candidate(
                    candidate, document_id=next_id + offset, uploaded_at=uploaded_at
                )
                for offset, candidate in enumerate(candidates)
            ]
            self._write(next_id + len(inserted), documents + inserted)
        for document in inserted:
            logger.info("Stored document %d (%s) in %s", document.id, document.filename, self._file_path)
        return inserted

    def list_all(self) -> List[CvDocument]:
        """Load every stored document, returning an empty list when absent."""

        with self._lock:
            _, documents = self._read()
        return documents

    def clear_all(self) -> None:
        """Remove every stored document and reset the id counter."""

        with self._lock:
            _, documents = self._read()
            self._write(FIRST_DOCUMENT_ID, [])
        logger.info("Cleared %d documents from %s", len(documents), self._file_path)

    def _read(self) -> Tuple[int, List[CvDocument]]:
        """Return the stored id counter and documents."""

        if not self._file_path.exists():
            return FIRST_DOCUMENT_ID, []
        try:
            with self._file_path.open("r", encoding="utf-8") as input_file:
                data: Any = json.load(input_file)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as error:
            logger.exception("Failed to read document store %s", self._file_path)
            raise StorageError("The document store could not be read.") from error

        if not isinstance(data, dict):
            raise StorageError("The document store has an unexpected format.")
        try:
            documents = [CvDocument.from_dict(entry) for entry in data.get("documents", [])]
            next_id = int(data.get("next_id", FIRST_DOCUMENT_ID))
        except (TypeError, ValueError) as error:
            raise StorageError("The document store contains invalid entries.") from error

        highest = max((document.id for document in documents), default=0)
        return max(next_id, highest + 1), documents

    def _write(self, next_id: int, documents: List[CvDocument]) -> None:
        """Atomically replace the stored file with the provided state."""

        payload = {
            "next_id": next_id,
            "documents": [document.to_dict() for document in documents],
        }
        temporary_path = self._file_path.with_name(self._file_path.name + ".tmp")
        try:
            with temporary_path.open("w", encoding="utf-8") as output_file:
                json.dump(payload, output_file, ensure_ascii=False, indent=2)
            temporary_path.replace(self._file_path)
        except OSError as error:
            logger.exception("Failed to write document store %s", self._file_path)
            raise StorageError("The document store could not be written.") from error
