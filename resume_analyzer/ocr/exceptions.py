class OcrError(Exception):
    """Raised when the OCR backend fails to recognize an image."""
