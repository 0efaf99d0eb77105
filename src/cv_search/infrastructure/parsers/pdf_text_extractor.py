"""Text extractor for PDF uploads."""
from __future__ import annotations

import io

from PyPDF2 import PdfReader
from PyPDF2.errors import PdfReadError

from cv_search.domain.errors import ValidationError


class PdfTextExtractor:
    """Extract the plain text of every page from PDF bytes."""

    def extract(self, document_bytes: bytes) -> str:
        """Return the text of all pages joined by newlines."""

        try:
            reader = PdfReader(io.BytesIO(document_bytes))
        except PdfReadError as error:
            raise ValidationError("The provided PDF file could not be read.") from error
        except Exception as error:
            raise ValidationError("Unexpected error while reading the PDF file.") from error

        page_texts = []
        for page in reader.pages:
            try:
                page_texts.append(page.extract_text() or "")
            except PdfReadError as error:
                raise ValidationError("The PDF file contains unreadable pages.") from error
            except Exception as error:
                raise ValidationError("Unexpected error while reading a PDF page.") from error
        return "\n".join(page_texts)
