from __future__ import annotations

class PhotoFilterError(Exception):
    """Base exception for the application."""

class ValidationError(PhotoFilterError):
    """Raised when invocation fields are missing or malformed."""

    def __init__(self, field_id: str, message: str) -> None:
        super().__init__(message)
        self.field_id = field_id

class ExtractionError(PhotoFilterError):
    """Raised when metadata records cannot be obtained for a directory."""

class ExifToolError(ExtractionError):
    """Raised when ExifTool invocation fails."""

class FilesystemError(PhotoFilterError):
    """Raised when copying a matched file fails."""
