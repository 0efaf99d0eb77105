"""Text extractor for DOCX uploads."""
from __future__ import annotations

import io
import zipfile

import docx
from docx.opc.exceptions import PackageNotFoundError

from cv_search.domain.errors import ValidationError


class DocxTextExtractor:
    """Extract paragraph and table text from Word documents."""

    def extract(self, document_bytes: bytes) -> str:
        """Return the document paragraphs followed by table cells, one per line."""

        try:
            document = docx.Document(io.BytesIO(document_bytes))
        except (PackageNotFoundError, zipfile.BadZipFile, KeyError, ValueError) as error:
            raise ValidationError("The provided DOCX file could not be read.") from error

        lines = [paragraph.text for paragraph in document.paragraphs]
        for table in document.tables:
            for row in table.rows:
                for cell in row.cells:
                    lines.append(cell.text)
        return "\n".join(line for line in lines if line.strip())
