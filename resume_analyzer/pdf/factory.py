import threading
from typing import ClassVar

from resume_analyzer.config.settings import Settings
from resume_analyzer.pdf.base import BasePdfBackend
from resume_analyzer.pdf.pdfplumber_adapter import PdfPlumberAdapter
from resume_analyzer.pdf.pymupdf_adapter import PyMuPdfAdapter


class PdfBackendFactory:
    """Creates the correct PDF backend based on settings."""

    ADAPTERS: ClassVar[dict[str, type[BasePdfBackend]]] = {
        "pdfplumber": PdfPlumberAdapter,
        "pymupdf": PyMuPdfAdapter,
    }

    _shared: ClassVar[dict[str, BasePdfBackend]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def create(cls, settings: Settings) -> BasePdfBackend:
        engine = settings.pdf_engine.lower()
        adapter_cls = cls.ADAPTERS.get(engine)
        if adapter_cls is None:
            raise ValueError(
                f"Unknown PDF engine '{engine}'. Choose from: {list(cls.ADAPTERS)}"
            )
        return adapter_cls()

    @classmethod
    def shared(cls, settings: Settings) -> BasePdfBackend:
        """Return the process-wide backend for the configured engine.

        Created on first use and reused afterwards; concurrent first callers
        wait on the lock and receive the same instance.
        """
        engine = settings.pdf_engine.lower()
        backend = cls._shared.get(engine)
        if backend is not None:
            return backend
        with cls._lock:
            backend = cls._shared.get(engine)
            if backend is None:
                backend = cls.create(settings)
                cls._shared[engine] = backend
        return backend

    @classmethod
    def reset_shared(cls) -> None:
        with cls._lock:
            cls._shared.clear()
