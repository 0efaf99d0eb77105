"""Dispatch text extraction to the extractor registered for a MIME type."""
from __future__ import annotations

from typing import Mapping, Protocol

from cv_search.domain.errors import ValidationError
from cv_search.infrastructure.parsers.docx_text_extractor import DocxTextExtractor
from cv_search.infrastructure.parsers.pdf_text_extractor import PdfTextExtractor

PDF_CONTENT_TYPE = "application/pdf"
DOCX_CONTENT_TYPE = (
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
)


class BinaryTextExtractor(Protocol):
    """Represent a service turning raw file bytes into plain text."""

    def extract(self, document_bytes: bytes) -> str:
        """Return the text contained in ``document_bytes``."""


class ContentTypeTextExtractor:
    """Select a text extractor based on the uploaded file's content type."""

    def __init__(self, extractors: Mapping[str, BinaryTextExtractor] | None = None) -> None:
        """Initialize the dispatcher with PDF and DOCX support by default."""

        self._extractors = dict(
            extractors
            if extractors is not None
            else {
                PDF_CONTENT_TYPE: PdfTextExtractor(),
                DOCX_CONTENT_TYPE: DocxTextExtractor(),
            }
        )

    @property
    def supported_content_types(self) -> frozenset[str]:
        """Return the MIME types this dispatcher can handle."""

        return frozenset(self._extractors)

    def extract(self, document_bytes: bytes, content_type: str) -> str:
        """Extract text using the extractor registered for ``content_type``."""

        extractor = self._extractors.get(content_type)
        if extractor is None:
            raise ValidationError(
                f"Unsupported content type '{content_type}'. Only PDF and DOCX files are allowed."
            )
        return extractor.extract(document_bytes)
