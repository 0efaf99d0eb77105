"""Domain models for uploaded CV documents."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from cv_search.domain.errors import ValidationError


@dataclass(frozen=True)
class DocumentCandidate:
    """Extracted CV data waiting to be stored by a repository."""

    filename: str
    content_type: str
    extracted_text: str

    @classmethod
    def create(
        cls, filename: str, content_type: str, extracted_text: str
    ) -> "DocumentCandidate":
        """Return a candidate after checking the extracted text is usable."""

        if not filename:
            raise ValidationError("The uploaded file has no name.")
        if not extracted_text or not extracted_text.strip():
            raise ValidationError(
                f"No text could be extracted from '{filename}'."
            )
        return cls(
            filename=filename,
            content_type=content_type,
            extracted_text=extracted_text,
        )


@dataclass(frozen=True)
class CvDocument:
    """Stored, immutable record of one uploaded CV and its extracted text."""

    id: int
    filename: str
    content_type: str
    extracted_text: str
    uploaded_at: datetime

    @classmethod
    def from_candidate(
        cls, candidate: DocumentCandidate, document_id: int, uploaded_at: datetime
    ) -> "CvDocument":
        """Attach repository assigned identity and timestamp to ``candidate``."""

        return cls(
            id=document_id,
            filename=candidate.filename,
            content_type=candidate.content_type,
            extracted_text=candidate.extracted_text,
            uploaded_at=uploaded_at,
        )

    def to_dict(self) -> dict:
        """Return a JSON-serializable representation of the document."""
        return {
            "id": self.id,
            "filename": self.filename,
            "contentType": self.content_type,
            "extractedText": self.extracted_text,
            "uploadedAt": self.uploaded_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CvDocument":
        """Create a document instance from its serialized representation."""

        if not isinstance(data, Mapping):
            raise ValueError("Document data must be a mapping.")

        try:
            document_id = int(data["id"])
        except (KeyError, TypeError, ValueError):
            raise ValueError("Document id must be an integer.") from None

        filename = data.get("filename")
        content_type = data.get("contentType")
        extracted_text = data.get("extractedText")
        for field_name, value in (
            ("filename", filename),
            ("contentType", content_type),
            ("extractedText", extracted_text),
        ):
            if not isinstance(value, str):
                raise ValueError(f"Document {field_name} must be a string.")

        raw_uploaded_at = data.get("uploadedAt")
        if not isinstance(raw_uploaded_at, str):
            raise ValueError("Document uploadedAt must be an ISO-8601 string.")
        try:
            uploaded_at = datetime.fromisoformat(raw_uploaded_at)
        except ValueError:
            raise ValueError("Document uploadedAt must be an ISO-8601 string.") from None

        return cls(
            id=document_id,
            filename=filename,
            content_type=content_type,
            extracted_text=extracted_text,
            uploaded_at=uploaded_at,
        )
