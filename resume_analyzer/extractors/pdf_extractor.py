"""PDF text extraction with an OCR fallback for scanned documents."""

from contextlib import closing

from resume_analyzer.extractors.base import BaseExtractor
from resume_analyzer.ingestion.exceptions import ExtractionError
from resume_analyzer.ingestion.models import Extraction, ExtractionMethod, ProgressCallback
from resume_analyzer.logging.logger import Log
from resume_analyzer.ocr.base import BaseOcrEngine
from resume_analyzer.ocr.exceptions import OcrError
from resume_analyzer.pdf.base import BasePdfBackend
from resume_analyzer.pdf.exceptions import PdfExtractionError


class PdfExtractor(BaseExtractor):
    """Reads the PDF text layer, falling back to page OCR when it is too short.

    The threshold is a heuristic: a genuine one-line PDF is treated as
    scanned and goes through OCR.
    """

    def __init__(
        self,
        backend: BasePdfBackend,
        ocr_engine: BaseOcrEngine,
        *,
        threshold: int = 50,
        render_scale: float = 2.0,
        language: str = "eng",
    ) -> None:
        self._backend = backend
        self._ocr_engine = ocr_engine
        self._threshold = threshold
        self._render_scale = render_scale
        self._language = language

    def extract(
        self,
        data: bytes,
        file_name: str,
        on_progress: ProgressCallback | None = None,
    ) -> Extraction:
        try:
            text = self._backend.extract(data)
        except PdfExtractionError as exc:
            raise ExtractionError(f"Failed to extract text from PDF: {exc}") from exc

        if len(text) >= self._threshold:
            return Extraction(text=text, method=ExtractionMethod.PDF_TEXT_LAYER)

        Log.info(
            f"{file_name}: text layer has {len(text)} chars "
            f"(< {self._threshold}), falling back to OCR"
        )
        if on_progress is not None:
            on_progress(0)
        try:
            text = self._ocr_pages(data, file_name, on_progress)
        except (PdfExtractionError, OcrError) as exc:
            raise ExtractionError(f"Failed to process scanned PDF: {exc}") from exc
        return Extraction(text=text, method=ExtractionMethod.OCR_SCANNED_PDF)

    def _ocr_pages(
        self,
        data: bytes,
        file_name: str,
        on_progress: ProgressCallback | None,
    ) -> str:
        total_pages = self._backend.page_count(data)
        page_texts: list[str] = []
        with closing(self._backend.render_pages(data, self._render_scale)) as pages:
            for number, image in enumerate(pages, start=1):
                if on_progress is not None:
                    on_progress(round((number - 1) / total_pages * 100))
                try:
                    page_texts.append(self._ocr_engine.recognize(image, self._language))
                except OcrError as exc:
                    raise OcrError(f"page {number}: {exc}") from exc
                Log.debug(f"{file_name} - Page {number}: OCR complete")
        if on_progress is not None:
            on_progress(100)
        return "\n\n".join(page_texts).strip()
