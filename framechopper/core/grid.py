"""Frame addressing for uniform sprite sheet grids.

A sheet laid out as a :class:`GridGeometry` is stored row-major, four bytes
per pixel, so its row stride is ``columns * frame_width * 4``. Frame ``i``
lives at grid cell ``(i % columns, i // columns)``.
"""

from __future__ import annotations

import math
import logging
from typing import Iterator

from . import BYTES_PER_PIXEL, GridGeometry
from .errors import GeometryError, ValidationError

logger = logging.getLogger(__name__)


def source_geometry(width: int, height: int, columns: int, rows: int) -> GridGeometry:
    """Split a ``width`` x ``height`` sheet into ``columns`` x ``rows`` frames."""

    if columns <= 0 or rows <= 0:
        raise GeometryError(f"Frame counts must be positive (got {columns}x{rows})")
    if width % columns or height % rows:
        raise GeometryError(
            f"{width}x{height} sheet does not divide evenly into {columns}x{rows} frames"
        )
    geometry = GridGeometry(width // columns, height // rows, columns, rows)
    if geometry.frame_width == 0 or geometry.frame_height == 0:
        raise GeometryError(f"{width}x{height} sheet is too small for {columns}x{rows} frames")
    return geometry


def output_geometry(frame_width: int, frame_height: int, frame_count: int, max_columns: int) -> GridGeometry:
    """Compute the grid that packs ``frame_count`` frames at most ``max_columns`` wide."""

    if frame_count <= 0:
        raise GeometryError("No frames to lay out")
    if max_columns <= 0:
        raise GeometryError(f"Maximum columns must be positive (got {max_columns})")
    columns = min(max_columns, frame_count)
    rows = math.ceil(frame_count / columns)
    return GridGeometry(frame_width, frame_height, columns, rows)


def frame_total(geometry: GridGeometry) -> int:
    return geometry.columns * geometry.rows


def sheet_size(geometry: GridGeometry) -> tuple[int, int]:
    return geometry.columns * geometry.frame_width, geometry.rows * geometry.frame_height


def row_stride(geometry: GridGeometry) -> int:
    return geometry.columns * geometry.frame_width * BYTES_PER_PIXEL


def frame_row_bytes(geometry: GridGeometry) -> int:
    return geometry.frame_width * BYTES_PER_PIXEL


def frame_offset(geometry: GridGeometry, index: int) -> int:
    """Byte offset of the top-left pixel of frame ``index``."""

    if not 0 <= index < frame_total(geometry):
        raise IndexError(f"Frame index {index} outside {geometry.columns}x{geometry.rows} grid")
    row, column = divmod(index, geometry.columns)
    return row * geometry.frame_height * row_stride(geometry) + column * frame_row_bytes(geometry)


def frame_spans(geometry: GridGeometry, index: int) -> list[tuple[int, int]]:
    """Half-open byte spans covered by each pixel row of frame ``index``."""

    start = frame_offset(geometry, index)
    stride = row_stride(geometry)
    width = frame_row_bytes(geometry)
    return [(start + line * stride, start + line * stride + width) for line in range(geometry.frame_height)]


def cell_position(geometry: GridGeometry, index: int) -> tuple[int, int]:
    """Pixel origin ``(x, y)`` of grid cell ``index``."""

    row, column = divmod(index, geometry.columns)
    return column * geometry.frame_width, row * geometry.frame_height


def iter_cell_offsets(geometry: GridGeometry, count: int) -> Iterator[int]:
    """Walk the destination cursor over the first ``count`` cells.

    The cursor moves one frame width per cell; after the last column it jumps
    down one grid row and back to column 0.
    """

    if count > frame_total(geometry):
        raise GeometryError(
            f"{count} frames do not fit a {geometry.columns}x{geometry.rows} grid"
        )
    horizontal_step = frame_row_bytes(geometry)
    vertical_step = row_stride(geometry) * geometry.frame_height
    wrap_step = vertical_step - horizontal_step * (geometry.columns - 1)

    offset = 0
    column = 0
    for _ in range(count):
        yield offset
        column += 1
        if column >= geometry.columns:
            column = 0
            offset += wrap_step
        else:
            offset += horizontal_step


def select_frame_indices(total: int, step: int) -> list[int]:
    """Pick every ``step``-th frame index starting from 0."""

    if step <= 0:
        raise ValidationError(f"Frame step must be greater than zero (got {step})")
    indices = list(range(0, total, step))
    logger.debug("Selected %s of %s frames with step %s", len(indices), total, step)
    return indices
