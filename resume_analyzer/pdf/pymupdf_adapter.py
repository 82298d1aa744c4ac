from collections.abc import Generator

import pymupdf

from resume_analyzer.pdf.base import BasePdfBackend
from resume_analyzer.pdf.exceptions import PdfExtractionError, PdfRenderError


class PyMuPdfAdapter(BasePdfBackend):
    """PDF backend built on PyMuPDF."""

    def extract_pages(self, pdf_bytes: bytes, max_pages: int | None = None) -> list[str]:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                limit = doc.page_count if max_pages is None else min(max_pages, doc.page_count)
                return [doc[i].get_text() for i in range(limit)]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf extraction failed: {exc}") from exc

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                return int(doc.page_count)
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not open document: {exc}") from exc

    def render_pages(self, pdf_bytes: bytes, scale: float) -> Generator[bytes, None, None]:
        try:
            doc = pymupdf.open(stream=pdf_bytes, filetype="pdf")  # type: ignore[no-untyped-call]
        except Exception as exc:
            raise PdfExtractionError(f"pymupdf could not open document: {exc}") from exc
        matrix = pymupdf.Matrix(scale, scale)
        with doc:
            for number, page in enumerate(doc, start=1):
                try:
                    pixmap = page.get_pixmap(matrix=matrix)
                    png = pixmap.tobytes("png")
                except Exception as exc:
                    raise PdfRenderError(f"Failed to render page {number}: {exc}") from exc
                yield png
