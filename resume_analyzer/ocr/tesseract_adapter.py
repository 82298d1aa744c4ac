import io

import pytesseract
from PIL import Image

from resume_analyzer.ingestion.models import ProgressCallback
from resume_analyzer.ocr.base import RECOGNIZING_TEXT, BaseOcrEngine
from resume_analyzer.ocr.exceptions import OcrError


class TesseractAdapter(BaseOcrEngine):
    """OCR engine backed by the Tesseract binary via pytesseract."""

    def __init__(self, tesseract_cmd: str = "") -> None:
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize(
        self,
        image: bytes,
        language: str = "eng",
        on_progress: ProgressCallback | None = None,
    ) -> str:
        try:
            self._report(on_progress, "loading image", 0.0)
            with Image.open(io.BytesIO(image)) as img:
                img.load()
                self._report(on_progress, RECOGNIZING_TEXT, 0.0)
                text = pytesseract.image_to_string(img, lang=language)
            self._report(on_progress, RECOGNIZING_TEXT, 1.0)
        except OcrError:
            raise
        except Exception as exc:
            raise OcrError(f"tesseract recognition failed: {exc}") from exc
        return (text or "").strip()
