from resume_analyzer.logging.logger import Log
from resume_analyzer.pdf.base import BasePdfBackend


class ScannedDocumentDetector:
    """Guesses whether a PDF is image-only by sampling its text layer."""

    def __init__(
        self,
        backend: BasePdfBackend,
        *,
        threshold: int = 50,
        sample_pages: int = 3,
    ) -> None:
        self._backend = backend
        self._threshold = threshold
        self._sample_pages = sample_pages

    def looks_scanned(self, pdf_bytes: bytes) -> bool:
        """Return True when the first pages carry almost no text.

        Never raises: a document that cannot be inspected is reported as
        not scanned so callers fall through to normal extraction.
        """
        try:
            pages = self._backend.extract_pages(pdf_bytes, max_pages=self._sample_pages)
        except Exception as exc:
            Log.warning(f"Could not check whether PDF is scanned: {exc}")
            return False
        total = sum(len(text) for text in pages)
        return total < self._threshold
