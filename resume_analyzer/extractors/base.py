from abc import ABC, abstractmethod

from resume_analyzer.ingestion.models import Extraction, ProgressCallback


class BaseExtractor(ABC):
    """Contract for all format extractors."""

    @abstractmethod
    def extract(
        self,
        data: bytes,
        file_name: str,
        on_progress: ProgressCallback | None = None,
    ) -> Extraction:
        """Turn a raw file buffer into text.

        Args:
            data: Raw file content.
            file_name: Display name, used in log lines.
            on_progress: Receives integer percentages during long operations.

        Returns:
            Extraction with the text and the method that produced it.

        Raises:
            ExtractionError: with a human-readable cause.
        """
