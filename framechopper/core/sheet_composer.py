"""Sprite sheet composition from extracted frames."""

from __future__ import annotations

import logging
from typing import Iterable

from . import PixelBuffer
from . import grid
from .block_copier import copy_block
from .errors import GeometryError

logger = logging.getLogger(__name__)


def compose_sheet(frames: Iterable[PixelBuffer], max_columns: int) -> PixelBuffer:
    """Pack frames left to right, top to bottom, at most ``max_columns`` per row.

    Cells past the last frame stay transparent black.
    """

    frames = list(frames)
    if not frames:
        raise GeometryError("No frames provided to compose.")

    frame_width, frame_height = frames[0].size
    for position, frame in enumerate(frames):
        if frame.size != (frame_width, frame_height):
            raise GeometryError(
                f"Frame {position} is {frame.width}x{frame.height}, expected {frame_width}x{frame_height}"
            )

    geometry = grid.output_geometry(frame_width, frame_height, len(frames), max_columns)
    sheet = PixelBuffer.blank(*grid.sheet_size(geometry))
    logger.debug(
        "Composing %s frames into %sx%s cells (%sx%s px)",
        len(frames),
        geometry.columns,
        geometry.rows,
        sheet.width,
        sheet.height,
    )

    for frame, offset in zip(frames, grid.iter_cell_offsets(geometry, len(frames))):
        copy_block(
            frame.data,
            0,
            frame.row_stride,
            sheet.data,
            offset,
            sheet.row_stride,
            frame.row_stride,
            frame.height,
        )
    return sheet
