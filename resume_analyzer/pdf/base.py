from abc import ABC, abstractmethod
from collections.abc import Generator


class BasePdfBackend(ABC):
    """Contract for all PDF backend adapters."""

    @abstractmethod
    def extract_pages(self, pdf_bytes: bytes, max_pages: int | None = None) -> list[str]:
        """Extract the text layer of each page, in page order.

        Args:
            pdf_bytes: Raw PDF file content.
            max_pages: Only read the first N pages when set.

        Raises:
            PdfExtractionError: if the document cannot be parsed.
        """

    @abstractmethod
    def page_count(self, pdf_bytes: bytes) -> int:
        """Return the number of pages in the document."""

    @abstractmethod
    def render_pages(self, pdf_bytes: bytes, scale: float) -> Generator[bytes, None, None]:
        """Rasterize each page to PNG bytes at ``scale`` times its default size.

        Raises:
            PdfRenderError: naming the page that could not be rendered.
        """

    def extract(self, pdf_bytes: bytes) -> str:
        """Extract the whole text layer as a single stripped string."""
        return "\n".join(self.extract_pages(pdf_bytes)).strip()
