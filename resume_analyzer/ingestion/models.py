from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class ExtractionMethod(str, Enum):
    """How the text of a file was obtained."""

    DIRECT_READ = "Direct text reading"
    PDF_TEXT_LAYER = "PDF text extraction"
    OCR_IMAGE = "OCR (image)"
    OCR_SCANNED_PDF = "OCR (scanned PDF)"
    WORD_DOCUMENT = "Word document extraction"


@dataclass(frozen=True)
class UploadedFile:
    """A user-selected file held in memory for one pipeline run."""

    name: str
    mime_type: str
    data: bytes = field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class ValidationVerdict:
    accepted: bool
    reason: str


@dataclass(frozen=True)
class BatchValidation:
    accepted: list[UploadedFile] = field(default_factory=list)
    rejections: list[str] = field(default_factory=list)
    batch_rejected: bool = False

    @property
    def success(self) -> bool:
        return not self.rejections


@dataclass(frozen=True)
class Extraction:
    """Raw output of a format extractor."""

    text: str
    method: ExtractionMethod


@dataclass(frozen=True)
class ExtractionSuccess:
    text: str
    method: ExtractionMethod
    file_name: str
    file_size: int
    file_type: str

    success: bool = field(default=True, init=False)


@dataclass(frozen=True)
class ExtractionFailure:
    error: str
    file_name: str
    file_size: int
    file_type: str

    success: bool = field(default=False, init=False)


ExtractionResult = ExtractionSuccess | ExtractionFailure


@dataclass(frozen=True)
class BatchProgress:
    """Progress event emitted while a batch is processed."""

    current_file_index: int
    total_files: int
    file_name: str
    percent_complete: int


ProgressCallback = Callable[[int], None]
BatchProgressCallback = Callable[[BatchProgress], None]

DOCUMENT_SEPARATOR = "\n\n---\n\n"


def aggregate_documents(results: list[ExtractionResult]) -> str:
    """Join the text of every successful result, keeping batch order."""
    return DOCUMENT_SEPARATOR.join(
        r.text for r in results if isinstance(r, ExtractionSuccess)
    )
