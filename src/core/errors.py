# src/core/errors.py — v1
"""Document processing error taxonomy.

Every failure surfaced by the pipeline is a ``DocumentError`` subclass with a
stable ``kind`` string, so batch reports and CLI output can classify failures
without isinstance ladders.
"""

from __future__ import annotations


class DocumentError(Exception):
    """Base class for all document pipeline failures."""

    kind: str = "other"

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(message)


class InvalidExtensionError(DocumentError):
    """Path has no file extension, so no extractor can be selected."""

    kind = "invalid_extension"

    def __init__(self, path: str = "") -> None:
        self.path = path
        super().__init__(f"Invalid file extension: {path!r}" if path else "Invalid file extension")


class FileTooLargeError(DocumentError):
    """File exceeds the configured size ceiling."""

    kind = "file_too_large"

    def __init__(self, size_bytes: int, limit_bytes: int | None = None) -> None:
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes
        msg = f"File too large: {size_bytes} bytes"
        if limit_bytes is not None:
            msg += f" (limit {limit_bytes} bytes)"
        super().__init__(msg)


class UnsupportedFileTypeError(DocumentError):
    """No extractor is registered for the extension."""

    kind = "unsupported_file_type"

    def __init__(self, extension: str) -> None:
        self.extension = extension
        super().__init__(f"Unsupported file type: {extension}")


class PdfExtractionError(DocumentError):
    kind = "pdf_error"


class ExcelExtractionError(DocumentError):
    kind = "excel_error"


class WordExtractionError(DocumentError):
    kind = "word_error"


class OcrExtractionError(DocumentError):
    kind = "ocr_error"


class TextExtractionError(DocumentError):
    kind = "text_error"


class InsightError(DocumentError):
    """The completion call failed or timed out (never a parse failure)."""

    kind = "insight_error"


class DocumentIOError(DocumentError):
    kind = "io_error"


class OtherDocumentError(DocumentError):
    kind = "other"
