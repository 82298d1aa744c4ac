import pytest
from pydantic import ValidationError

from resume_analyzer.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_file_limits(self) -> None:
        s = Settings()
        assert s.max_files == 5
        assert s.max_file_size_bytes == 10 * 1024 * 1024

    def test_default_pdf_engine(self) -> None:
        s = Settings()
        assert s.pdf_engine == "pdfplumber"

    def test_default_scanned_threshold(self) -> None:
        s = Settings()
        assert s.scanned_text_threshold == 50
        assert s.scanned_sample_pages == 3

    def test_default_ocr_language(self) -> None:
        s = Settings()
        assert s.ocr_language == "eng"

    def test_default_retry_policy(self) -> None:
        s = Settings()
        assert s.inference_max_attempts == 3
        assert s.inference_initial_backoff_seconds == 1.0

    def test_default_inference_provider(self) -> None:
        s = Settings()
        assert s.inference_provider == "gemini"


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_max_files(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILES", "2")
        s = Settings()
        assert s.max_files == 2

    def test_loads_gemini_api_key(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "secret-key")
        s = Settings()
        assert s.gemini_api_key == "secret-key"

    def test_loads_pdf_engine(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PDF_ENGINE", "pymupdf")
        s = Settings()
        assert s.pdf_engine == "pymupdf"


class TestSettingsValidation:
    def test_invalid_max_files_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_FILES", "many")
        with pytest.raises(ValidationError):
            Settings()

    def test_invalid_backoff_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("INFERENCE_INITIAL_BACKOFF_SECONDS", "soon")
        with pytest.raises(ValidationError):
            Settings()
