"""End-to-end ingestion with real PDF/DOCX libraries; OCR is mocked."""

from unittest.mock import MagicMock

import pytest

from resume_analyzer.config.settings import Settings
from resume_analyzer.ingestion.models import (
    ExtractionFailure,
    ExtractionMethod,
    ExtractionSuccess,
    UploadedFile,
    aggregate_documents,
)
from resume_analyzer.ingestion.pipeline import FilePipeline, build_pipeline
from resume_analyzer.ingestion.validator import FileValidator
from resume_analyzer.ocr.exceptions import OcrError

MIB = 1024 * 1024
DOCX_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@pytest.fixture(params=["pdfplumber", "pymupdf"])
def settings(request: pytest.FixtureRequest, monkeypatch: pytest.MonkeyPatch) -> Settings:
    monkeypatch.setenv("PDF_ENGINE", request.param)
    return Settings()


@pytest.fixture()
def ocr_engine() -> MagicMock:
    engine = MagicMock()
    engine.recognize.return_value = "Text recognized by OCR"
    return engine


@pytest.fixture()
def pipeline(settings: Settings, ocr_engine: MagicMock) -> FilePipeline:
    return build_pipeline(settings, ocr_engine=ocr_engine)


@pytest.mark.integration
class TestIngestionPipeline:
    def test_text_pdf_uses_text_layer(
        self, pipeline: FilePipeline, ocr_engine: MagicMock, sample_pdf_bytes: bytes
    ) -> None:
        result = pipeline.process_file(
            UploadedFile(name="cv.pdf", mime_type="application/pdf", data=sample_pdf_bytes)
        )
        assert isinstance(result, ExtractionSuccess)
        assert result.method == ExtractionMethod.PDF_TEXT_LAYER
        assert "Jane Candidate" in result.text
        ocr_engine.recognize.assert_not_called()

    def test_blank_pdf_falls_back_to_ocr(
        self, pipeline: FilePipeline, ocr_engine: MagicMock, empty_pdf_bytes: bytes
    ) -> None:
        result = pipeline.process_file(
            UploadedFile(name="scan.pdf", mime_type="application/pdf", data=empty_pdf_bytes)
        )
        assert isinstance(result, ExtractionSuccess)
        assert result.method == ExtractionMethod.OCR_SCANNED_PDF
        assert result.text == "Text recognized by OCR"
        image = ocr_engine.recognize.call_args.args[0]
        assert image.startswith(b"\x89PNG")

    def test_docx(self, pipeline: FilePipeline, docx_bytes: bytes) -> None:
        result = pipeline.process_file(
            UploadedFile(name="cv.docx", mime_type=DOCX_TYPE, data=docx_bytes)
        )
        assert isinstance(result, ExtractionSuccess)
        assert result.method == ExtractionMethod.WORD_DOCUMENT
        assert "Python developer" in result.text

    def test_image_ocr_failure_is_returned_not_raised(
        self, pipeline: FilePipeline, ocr_engine: MagicMock, png_bytes: bytes
    ) -> None:
        ocr_engine.recognize.side_effect = OcrError("tesseract is not installed")
        result = pipeline.process_file(
            UploadedFile(name="scan.png", mime_type="image/png", data=png_bytes)
        )
        assert isinstance(result, ExtractionFailure)
        assert result.error

    def test_corrupt_pdf_is_returned_not_raised(self, pipeline: FilePipeline) -> None:
        result = pipeline.process_file(
            UploadedFile(name="bad.pdf", mime_type="application/pdf", data=b"%PDF-garbage")
        )
        assert isinstance(result, ExtractionFailure)
        assert result.file_name == "bad.pdf"
        assert result.error

    def test_mixed_batch_keeps_order_and_aggregates(
        self,
        pipeline: FilePipeline,
        sample_pdf_bytes: bytes,
        docx_bytes: bytes,
    ) -> None:
        files = [
            UploadedFile(name="notes.txt", mime_type="text/plain", data=b"Hello World"),
            UploadedFile(name="cv.pdf", mime_type="application/pdf", data=sample_pdf_bytes),
            UploadedFile(name="bad.pdf", mime_type="application/pdf", data=b"junk"),
            UploadedFile(name="cv.docx", mime_type=DOCX_TYPE, data=docx_bytes),
        ]
        results = pipeline.process_batch(files)
        assert [r.file_name for r in results] == ["notes.txt", "cv.pdf", "bad.pdf", "cv.docx"]
        assert [r.success for r in results] == [True, True, False, True]
        document = aggregate_documents(results)
        assert document.startswith("Hello World\n\n---\n\n")
        assert document.count("\n\n---\n\n") == 2


@pytest.mark.integration
class TestOversizeScenario:
    def test_text_accepted_and_oversize_pdf_rejected(self, pipeline: FilePipeline) -> None:
        text = UploadedFile(name="hello.txt", mime_type="text/plain", data=b"Hello World")
        big = UploadedFile(name="big.pdf", mime_type="application/pdf", data=b"0" * (11 * MIB))

        validation = FileValidator().validate_batch([text, big])
        assert validation.accepted == [text]
        assert "File size exceeds" in validation.rejections[0]

        results = pipeline.process_batch(validation.accepted)
        assert len(results) == 1
        assert isinstance(results[0], ExtractionSuccess)
        assert results[0].text == "Hello World"
