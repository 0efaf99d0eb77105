"""Use cases for uploading, listing and clearing CV documents."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Protocol, Sequence

from cv_search.domain.models.cv_document import CvDocument, DocumentCandidate
from cv_search.domain.repositories.document_repository import DocumentRepository


@dataclass(frozen=True)
class UploadedFile:
    """Raw bytes of one uploaded file with the metadata sent by the client."""

    filename: str
    content_type: str
    content: bytes


class TextExtractor(Protocol):
    """Represents a service capable of turning uploaded file bytes into text."""

    def extract(self, document_bytes: bytes, content_type: str) -> str:
        """Return the plain text contained in ``document_bytes``."""


class UploadDocumentUseCase:
    """Handle text extraction and storage of uploaded CV files."""

    def __init__(self, extractor: TextExtractor, repository: DocumentRepository) -> None:
        """Initialize the use case with its required dependencies."""

        self._extractor = extractor
        self._repository = repository

    def execute(self, filename: str, content_type: str, document_bytes: bytes) -> CvDocument:
        """Extract the text of the uploaded file and store it as a new document."""

        return self._repository.insert(self.prepare(filename, content_type, document_bytes))

    def execute_many(self, uploads: Sequence[UploadedFile]) -> List[CvDocument]:
        """Store every upload, or none of them when any fails extraction."""

        candidates = [
            self.prepare(upload.filename, upload.content_type, upload.content)
            for upload in uploads
        ]
        return self._repository.insert_many(candidates)

    def prepare(self, filename: str, content_type: str, document_bytes: bytes) -> DocumentCandidate:
        """Extract and validate the text of one upload without storing it."""

        extracted_text = self._extractor.extract(document_bytes, content_type)
        return DocumentCandidate.create(
            filename=filename,
            content_type=content_type,
            extracted_text=extracted_text,
        )


class ListDocumentsUseCase:
    """Retrieve every stored document without ranking."""

    def __init__(self, repository: DocumentRepository) -> None:
        """Initialize the use case with its required repository dependency."""
        self._repository = repository

    def execute(self) -> List[CvDocument]:
        """Return all stored documents."""
        return self._repository.list_all()


class ClearDocumentsUseCase:
    """Remove every stored document."""

    def __init__(self, repository: DocumentRepository) -> None:
        self._repository = repository

    def execute(self) -> None:
        """Clear the repository, restarting document ids."""

        self._repository.clear_all()
