from resume_analyzer.config.settings import Settings
from resume_analyzer.extractors.base import BaseExtractor
from resume_analyzer.extractors.docx_extractor import WordDocumentExtractor
from resume_analyzer.extractors.image_extractor import ImageExtractor
from resume_analyzer.extractors.pdf_extractor import PdfExtractor
from resume_analyzer.extractors.text_extractor import PlainTextExtractor
from resume_analyzer.ocr.base import BaseOcrEngine
from resume_analyzer.ocr.tesseract_adapter import TesseractAdapter
from resume_analyzer.pdf.base import BasePdfBackend
from resume_analyzer.pdf.factory import PdfBackendFactory


class ExtractorFactory:
    """Builds the MIME type to extractor mapping."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        *,
        pdf_backend: BasePdfBackend | None = None,
        ocr_engine: BaseOcrEngine | None = None,
    ) -> dict[str, BaseExtractor]:
        if pdf_backend is None:
            pdf_backend = PdfBackendFactory.shared(settings)
        if ocr_engine is None:
            ocr_engine = TesseractAdapter(tesseract_cmd=settings.tesseract_cmd)

        text = PlainTextExtractor()
        word = WordDocumentExtractor()
        image = ImageExtractor(ocr_engine, language=settings.ocr_language)
        pdf = PdfExtractor(
            pdf_backend,
            ocr_engine,
            threshold=settings.scanned_text_threshold,
            render_scale=settings.pdf_render_scale,
            language=settings.ocr_language,
        )
        return {
            "text/plain": text,
            "application/pdf": pdf,
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document": word,
            "application/msword": word,
            "image/png": image,
            "image/jpeg": image,
            "image/jpg": image,
        }
