"""Pre-processing checks on file count, size and declared MIME type."""

from typing import ClassVar

from resume_analyzer.ingestion.models import BatchValidation, UploadedFile, ValidationVerdict

_MIB = 1024 * 1024


class FileValidator:
    """Checks files against the size limit and the MIME type allow-list."""

    SUPPORTED_FILE_TYPES: ClassVar[dict[str, str]] = {
        "application/pdf": "PDF",
        "text/plain": "Text",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "Word Document",
        "application/msword": "Word Document",
        "image/png": "PNG Image",
        "image/jpeg": "JPEG Image",
        "image/jpg": "JPEG Image",
    }

    def __init__(self, max_files: int = 5, max_file_size_bytes: int = 10 * _MIB) -> None:
        self._max_files = max_files
        self._max_file_size_bytes = max_file_size_bytes

    def validate(self, file: UploadedFile) -> ValidationVerdict:
        if file.size > self._max_file_size_bytes:
            return ValidationVerdict(
                accepted=False,
                reason=(
                    f"File size exceeds {self._max_file_size_bytes / _MIB:g}MB limit. "
                    f"Current size: {file.size / _MIB:.2f}MB"
                ),
            )
        if file.mime_type not in self.SUPPORTED_FILE_TYPES:
            return ValidationVerdict(
                accepted=False,
                reason=(
                    f"Unsupported file type: {file.mime_type or 'unknown'}. "
                    "Supported types: PDF, TXT, DOCX, DOC, PNG, JPG"
                ),
            )
        return ValidationVerdict(accepted=True, reason="File is valid")

    def validate_batch(self, files: list[UploadedFile]) -> BatchValidation:
        """Partition a batch into accepted files and rejection messages.

        A batch larger than the configured maximum is rejected as a whole:
        nothing is accepted and a single rejection explains why.
        """
        if len(files) > self._max_files:
            return BatchValidation(
                accepted=[],
                batch_rejected=True,
                rejections=[
                    f"Maximum {self._max_files} files allowed. "
                    f"You selected {len(files)} files."
                ],
            )
        accepted: list[UploadedFile] = []
        rejections: list[str] = []
        for file in files:
            verdict = self.validate(file)
            if verdict.accepted:
                accepted.append(file)
            else:
                rejections.append(f"{file.name}: {verdict.reason}")
        return BatchValidation(accepted=accepted, rejections=rejections)
