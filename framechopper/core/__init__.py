"""Core data model for sprite sheet chopping."""

__all__ = [
    "PixelBuffer",
    "GridGeometry",
    "ChopSettings",
    "FramePlacement",
    "ProcessingOutcome",
]

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import numpy as np

BYTES_PER_PIXEL = 4


@dataclass(eq=False)
class PixelBuffer:
    """Flat, row-major RGBA pixels with explicit dimensions.

    ``data`` is a one-dimensional ``uint8`` array of ``width * height * 4``
    bytes. Extracted frames are plain pixel buffers too.
    """

    width: int
    height: int
    data: np.ndarray

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Negative buffer size {self.width}x{self.height}")
        if self.data.dtype != np.uint8 or self.data.ndim != 1:
            raise ValueError("Pixel data must be a flat uint8 array")
        expected = self.width * self.height * BYTES_PER_PIXEL
        if self.data.size != expected:
            raise ValueError(
                f"Pixel data holds {self.data.size} bytes, expected {expected} for {self.width}x{self.height}"
            )

    @classmethod
    def blank(cls, width: int, height: int) -> "PixelBuffer":
        """Allocate a fully transparent black buffer."""

        return cls(width, height, np.zeros(width * height * BYTES_PER_PIXEL, dtype=np.uint8))

    @property
    def row_stride(self) -> int:
        return self.width * BYTES_PER_PIXEL

    @property
    def size(self) -> tuple[int, int]:
        return self.width, self.height

    def copy(self) -> "PixelBuffer":
        return PixelBuffer(self.width, self.height, self.data.copy())


@dataclass(frozen=True)
class GridGeometry:
    """Partition of a sheet into ``columns`` x ``rows`` equal frames."""

    frame_width: int
    frame_height: int
    columns: int
    rows: int


@dataclass
class ChopSettings:
    """User-configurable settings for a chop run."""

    input_path: Path
    output_path: Path
    columns: int
    rows: int
    max_output_columns: int
    frame_step: int = 1
    strict_save: bool = True
    dry_run: bool = False


@dataclass
class FramePlacement:
    """Where a source frame landed in the output sheet."""

    index: int
    x: int
    y: int
    width: int
    height: int


@dataclass
class ProcessingOutcome:
    """Result of a chop run."""

    spritesheet_path: Optional[Path]
    source_geometry: GridGeometry
    output_geometry: GridGeometry
    frame_indices: list[int] = field(default_factory=list)
    placements: list[FramePlacement] = field(default_factory=list)
