import io
from collections.abc import Generator

import pdfplumber

from resume_analyzer.pdf.base import BasePdfBackend
from resume_analyzer.pdf.exceptions import PdfExtractionError, PdfRenderError

_DEFAULT_DPI = 72


class PdfPlumberAdapter(BasePdfBackend):
    """PDF backend built on pdfplumber (pypdfium2 for rendering)."""

    def extract_pages(self, pdf_bytes: bytes, max_pages: int | None = None) -> list[str]:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                pages = pdf.pages if max_pages is None else pdf.pages[:max_pages]
                return [page.extract_text() or "" for page in pages]
        except PdfExtractionError:
            raise
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber extraction failed: {exc}") from exc

    def page_count(self, pdf_bytes: bytes) -> int:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                return len(pdf.pages)
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not open document: {exc}") from exc

    def render_pages(self, pdf_bytes: bytes, scale: float) -> Generator[bytes, None, None]:
        try:
            pdf = pdfplumber.open(io.BytesIO(pdf_bytes))
        except Exception as exc:
            raise PdfExtractionError(f"pdfplumber could not open document: {exc}") from exc
        with pdf:
            for number, page in enumerate(pdf.pages, start=1):
                try:
                    image = page.to_image(resolution=_DEFAULT_DPI * scale).original
                    buf = io.BytesIO()
                    image.save(buf, format="PNG")
                except Exception as exc:
                    raise PdfRenderError(f"Failed to render page {number}: {exc}") from exc
                yield buf.getvalue()
