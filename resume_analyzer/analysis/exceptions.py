class AnalysisError(Exception):
    """Raised when an analysis cannot be prepared (missing prompt files)."""
