from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    max_files: int = 5
    max_file_size_bytes: int = 10 * 1024 * 1024

    pdf_engine: str = "pdfplumber"
    pdf_render_scale: float = 2.0
    # Heuristic: PDFs whose text layer is shorter than this are OCR'd.
    scanned_text_threshold: int = 50
    scanned_sample_pages: int = 3

    ocr_language: str = "eng"
    tesseract_cmd: str = ""

    inference_provider: str = "gemini"
    inference_max_attempts: int = 3
    inference_initial_backoff_seconds: float = 1.0

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash-preview-05-20"
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta"
    gemini_timeout_seconds: int = 60

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60
