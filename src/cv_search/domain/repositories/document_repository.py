"""Repository interfaces for storing uploaded CV documents."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import List, Sequence

from cv_search.domain.models.cv_document import CvDocument, DocumentCandidate


class DocumentRepository(ABC):
    """Defines the behavior of a repository that owns CV documents and their ids."""

    def insert(self, candidate: DocumentCandidate) -> CvDocument:
        """Store ``candidate`` under the next free id and return the stored document."""

        return self.insert_many([candidate])[0]

    @abstractmethod
    def insert_many(self, candidates: Sequence[DocumentCandidate]) -> List[CvDocument]:
        """Store every candidate in one step, assigning consecutive ids in order."""

    @abstractmethod
    def list_all(self) -> List[CvDocument]:
        """Return a snapshot of every stored document in insertion order."""

    @abstractmethod
    def clear_all(self) -> None:
        """Remove every document and reset id assignment to its initial value."""
