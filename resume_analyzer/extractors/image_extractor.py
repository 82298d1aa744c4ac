from resume_analyzer.extractors.base import BaseExtractor
from resume_analyzer.ingestion.exceptions import ExtractionError
from resume_analyzer.ingestion.models import Extraction, ExtractionMethod, ProgressCallback
from resume_analyzer.logging.logger import Log
from resume_analyzer.ocr.base import BaseOcrEngine
from resume_analyzer.ocr.exceptions import OcrError


class ImageExtractor(BaseExtractor):
    """Runs OCR over PNG and JPEG images."""

    def __init__(self, ocr_engine: BaseOcrEngine, language: str = "eng") -> None:
        self._ocr_engine = ocr_engine
        self._language = language

    def extract(
        self,
        data: bytes,
        file_name: str,
        on_progress: ProgressCallback | None = None,
    ) -> Extraction:
        if on_progress is not None:
            on_progress(0)
        Log.info(f"Running OCR on image {file_name}")
        try:
            text = self._ocr_engine.recognize(data, self._language, on_progress)
        except OcrError as exc:
            raise ExtractionError(f"Failed to extract text from image: {exc}") from exc
        return Extraction(text=text, method=ExtractionMethod.OCR_IMAGE)
