from abc import ABC, abstractmethod

from resume_analyzer.ingestion.models import ProgressCallback

RECOGNIZING_TEXT = "recognizing text"


class BaseOcrEngine(ABC):
    """Contract for all OCR engine adapters."""

    @abstractmethod
    def recognize(
        self,
        image: bytes,
        language: str = "eng",
        on_progress: ProgressCallback | None = None,
    ) -> str:
        """Recognize text in an encoded image (PNG, JPEG).

        Args:
            image: Encoded image bytes.
            language: Tesseract language code.
            on_progress: Receives integer percentages while text is
                being recognized.

        Returns:
            The recognized text, stripped.

        Raises:
            OcrError: on any backend failure. Never retried here.
        """

    @staticmethod
    def _report(
        on_progress: ProgressCallback | None,
        status: str,
        fraction: float,
    ) -> None:
        # Only the recognition phase is surfaced to callers.
        if on_progress is None or status != RECOGNIZING_TEXT:
            return
        on_progress(round(max(0.0, min(1.0, fraction)) * 100))
