class IngestionError(Exception):
    """Base exception for all ingestion-related errors."""


class FileValidationError(IngestionError):
    """Raised when a file is rejected before processing."""


class BatchValidationError(FileValidationError):
    """Raised when a whole batch is rejected (e.g. too many files)."""


class ExtractionError(IngestionError):
    """Raised when a format extractor cannot turn bytes into text."""


class EmptyContentError(ExtractionError):
    """Raised when extraction succeeded but produced no usable text."""
