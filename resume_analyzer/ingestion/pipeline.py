"""Per-file and per-batch document ingestion."""

from resume_analyzer.config.settings import Settings
from resume_analyzer.extractors.base import BaseExtractor
from resume_analyzer.extractors.factory import ExtractorFactory
from resume_analyzer.ingestion.exceptions import (
    BatchValidationError,
    EmptyContentError,
    ExtractionError,
    FileValidationError,
)
from resume_analyzer.ingestion.models import (
    BatchProgress,
    BatchProgressCallback,
    ExtractionFailure,
    ExtractionResult,
    ExtractionSuccess,
    ProgressCallback,
    UploadedFile,
)
from resume_analyzer.ingestion.validator import FileValidator
from resume_analyzer.logging.logger import Log
from resume_analyzer.ocr.base import BaseOcrEngine
from resume_analyzer.pdf.base import BasePdfBackend
from resume_analyzer.pdf.factory import PdfBackendFactory
from resume_analyzer.pdf.scan_detector import ScannedDocumentDetector


class FilePipeline:
    """Orchestrates validation -> extraction -> (OCR) for uploaded files.

    Files in a batch are processed one at a time, in selection order.
    """

    def __init__(
        self,
        validator: FileValidator,
        extractors: dict[str, BaseExtractor],
    ) -> None:
        self._validator = validator
        self._extractors = extractors

    def process_file(
        self,
        file: UploadedFile,
        on_progress: ProgressCallback | None = None,
    ) -> ExtractionResult:
        """Extract text from one file. Never raises.

        Any failure is returned as an ExtractionFailure so that one bad file
        cannot abort its siblings.
        """
        try:
            return self._extract(file, on_progress)
        except Exception as exc:
            Log.warning(f"Failed to process {file.name}: {exc}")
            return ExtractionFailure(
                error=str(exc) or exc.__class__.__name__,
                file_name=file.name,
                file_size=file.size,
                file_type=file.mime_type,
            )

    def process_batch(
        self,
        files: list[UploadedFile],
        on_progress: BatchProgressCallback | None = None,
    ) -> list[ExtractionResult]:
        """Process every accepted file of a batch, preserving order.

        Raises:
            BatchValidationError: if the batch is rejected as a whole.
        """
        validation = self._validator.validate_batch(files)
        if validation.batch_rejected:
            raise BatchValidationError(
                f"File validation failed: {', '.join(validation.rejections)}"
            )
        for rejection in validation.rejections:
            Log.warning(f"Skipping rejected file: {rejection}")

        accepted = validation.accepted
        total = len(accepted)
        results: list[ExtractionResult] = []
        for index, file in enumerate(accepted, start=1):
            Log.info(f"Processing file {index} of {total}: {file.name}")
            report = self._file_progress(on_progress, index, total, file.name)
            report(0)
            result = self.process_file(file, report)
            report(100)
            results.append(result)
        return results

    def _extract(
        self,
        file: UploadedFile,
        on_progress: ProgressCallback | None,
    ) -> ExtractionSuccess:
        verdict = self._validator.validate(file)
        if not verdict.accepted:
            raise FileValidationError(verdict.reason)

        extractor = self._extractors.get(file.mime_type)
        if extractor is None:
            raise ExtractionError(f"Unsupported file type: {file.mime_type}")

        extraction = extractor.extract(file.data, file.name, on_progress)
        text = extraction.text.strip()
        if not text:
            raise EmptyContentError("No text content found in the file")

        Log.info(
            f"Extracted {len(text)} chars from {file.name} "
            f"({extraction.method.value})"
        )
        return ExtractionSuccess(
            text=text,
            method=extraction.method,
            file_name=file.name,
            file_size=file.size,
            file_type=file.mime_type,
        )

    @staticmethod
    def _file_progress(
        on_progress: BatchProgressCallback | None,
        index: int,
        total: int,
        file_name: str,
    ) -> ProgressCallback:
        def report(percent: int) -> None:
            if on_progress is not None:
                on_progress(
                    BatchProgress(
                        current_file_index=index,
                        total_files=total,
                        file_name=file_name,
                        percent_complete=percent,
                    )
                )

        return report


def build_pipeline(
    settings: Settings,
    *,
    pdf_backend: BasePdfBackend | None = None,
    ocr_engine: BaseOcrEngine | None = None,
) -> FilePipeline:
    """Build a FilePipeline with all required extractors."""
    validator = FileValidator(
        max_files=settings.max_files,
        max_file_size_bytes=settings.max_file_size_bytes,
    )
    extractors = ExtractorFactory.create(
        settings,
        pdf_backend=pdf_backend,
        ocr_engine=ocr_engine,
    )
    return FilePipeline(validator=validator, extractors=extractors)


def build_scan_detector(
    settings: Settings,
    *,
    pdf_backend: BasePdfBackend | None = None,
) -> ScannedDocumentDetector:
    """Build the scanned-PDF pre-check on top of the shared PDF backend."""
    return ScannedDocumentDetector(
        pdf_backend if pdf_backend is not None else PdfBackendFactory.shared(settings),
        threshold=settings.scanned_text_threshold,
        sample_pages=settings.scanned_sample_pages,
    )
