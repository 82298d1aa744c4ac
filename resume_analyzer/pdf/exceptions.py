class PdfExtractionError(Exception):
    """Raised when the PDF text layer cannot be read."""


class PdfRenderError(PdfExtractionError):
    """Raised when a PDF page cannot be rasterized."""
