"""Domain-specific exceptions for the frame chopper."""

from pathlib import Path


class DecodeError(ValueError):
    """Raised when the input sheet is missing or cannot be decoded."""

    def __init__(self, path: Path, reason: str | None = None):
        self.path = path
        self.reason = reason
        message = f"Cannot open {path} file"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class EncodeError(RuntimeError):
    """Raised when the output sheet cannot be written."""

    def __init__(self, path: Path, reason: str | None = None):
        self.path = path
        self.reason = reason
        message = f"Cannot save {path} file"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class GeometryError(ValueError):
    """Raised when a sheet cannot be partitioned into, or built from, uniform frames."""


class ValidationError(ValueError):
    """Raised when user-provided settings fail validation."""
