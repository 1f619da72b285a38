"""Validation helpers for user inputs."""

from __future__ import annotations

from pathlib import Path

from ..core.errors import DecodeError, ValidationError


def validate_image_path(path: Path) -> Path:
    """Ensure the input sheet exists and is a regular file."""

    if not path:
        raise DecodeError(Path("<unset>"), reason="No path provided")
    if not path.exists():
        raise DecodeError(path, reason="File not found")
    if not path.is_file():
        raise DecodeError(path, reason="Not a file")
    return path


def parse_positive_int(value: str, field: str) -> int:
    """Parse a strictly positive integer from a command-line value."""

    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ValidationError(f"{field} must be an integer (got {value!r})") from exc
    if parsed <= 0:
        raise ValidationError(f"{field} must be greater than zero")
    return parsed


def validate_grid(columns: int, rows: int) -> None:
    """Ensure input frame counts are positive."""

    if columns <= 0:
        raise ValidationError("Horizontal frame number must be greater than zero")
    if rows <= 0:
        raise ValidationError("Vertical frame number must be greater than zero")


def validate_layout(max_columns: int, step: int) -> None:
    """Ensure the output row width and frame step are positive."""

    if max_columns <= 0:
        raise ValidationError("Max horizontal frame number must be greater than zero")
    if step <= 0:
        raise ValidationError("Frame counter step must be greater than zero")
