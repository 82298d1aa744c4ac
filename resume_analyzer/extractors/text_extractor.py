from resume_analyzer.extractors.base import BaseExtractor
from resume_analyzer.ingestion.exceptions import ExtractionError
from resume_analyzer.ingestion.models import Extraction, ExtractionMethod, ProgressCallback


class PlainTextExtractor(BaseExtractor):
    """Reads plain text files verbatim."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def extract(
        self,
        data: bytes,
        file_name: str,
        on_progress: ProgressCallback | None = None,
    ) -> Extraction:
        try:
            text = data.decode(self._encoding)
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"Failed to read text file: {exc}") from exc
        return Extraction(text=text, method=ExtractionMethod.DIRECT_READ)
