import io
from collections.abc import Iterator

import docx
from docx.document import Document
from docx.oxml.ns import qn
from docx.table import Table
from docx.text.paragraph import Paragraph

from resume_analyzer.extractors.base import BaseExtractor
from resume_analyzer.ingestion.exceptions import ExtractionError
from resume_analyzer.ingestion.models import Extraction, ExtractionMethod, ProgressCallback


class WordDocumentExtractor(BaseExtractor):
    """Converts Word documents to plain text with python-docx.

    Paragraphs and tables are read in body order; each table row becomes one
    ``" | "``-joined line. Legacy binary ``.doc`` files are not readable by
    python-docx and fail with the converter's message.
    """

    def extract(
        self,
        data: bytes,
        file_name: str,
        on_progress: ProgressCallback | None = None,
    ) -> Extraction:
        try:
            document = docx.Document(io.BytesIO(data))
            lines = list(self._body_lines(document))
        except Exception as exc:
            raise ExtractionError(f"Failed to extract text from Word document: {exc}") from exc
        return Extraction(text="\n".join(lines).strip(), method=ExtractionMethod.WORD_DOCUMENT)

    @staticmethod
    def _body_lines(document: Document) -> Iterator[str]:
        for child in document.element.body.iterchildren():
            if child.tag == qn("w:p"):
                yield Paragraph(child, document).text
            elif child.tag == qn("w:tbl"):
                for row in Table(child, document).rows:
                    cells = [cell.text.strip() for cell in row.cells if cell.text.strip()]
                    if cells:
                        yield " | ".join(cells)
