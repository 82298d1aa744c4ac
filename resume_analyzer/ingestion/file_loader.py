import mimetypes
from pathlib import Path

from resume_analyzer.ingestion.models import UploadedFile

mimetypes.add_type(
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document", ".docx"
)


def guess_mime_type(path: Path) -> str:
    """Guess a file's MIME type from its extension ('' when unknown)."""
    mime_type, _ = mimetypes.guess_type(path.name)
    return mime_type or ""


class FileLoader:
    """Reads local files into UploadedFile instances."""

    def load(self, path: Path) -> UploadedFile:
        """Read file bytes from disk.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return UploadedFile(
            name=path.name,
            mime_type=guess_mime_type(path),
            data=path.read_bytes(),
        )

    def load_many(self, paths: list[Path]) -> list[UploadedFile]:
        return [self.load(path) for path in paths]
