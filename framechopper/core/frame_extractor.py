"""Frame extraction from a decoded sprite sheet."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List

from . import GridGeometry, PixelBuffer
from . import grid
from .block_copier import copy_block
from .errors import GeometryError

logger = logging.getLogger(__name__)


def extract_frame(sheet: PixelBuffer, geometry: GridGeometry, index: int) -> PixelBuffer:
    """Copy frame ``index`` out of ``sheet`` into its own buffer."""

    if sheet.size != grid.sheet_size(geometry):
        raise GeometryError(
            f"{sheet.width}x{sheet.height} sheet does not match a "
            f"{geometry.columns}x{geometry.rows} grid of {geometry.frame_width}x{geometry.frame_height} frames"
        )
    frame = PixelBuffer.blank(geometry.frame_width, geometry.frame_height)
    copy_block(
        sheet.data,
        grid.frame_offset(geometry, index),
        sheet.row_stride,
        frame.data,
        0,
        frame.row_stride,
        frame.row_stride,
        frame.height,
    )
    return frame


def iter_frames(sheet: PixelBuffer, geometry: GridGeometry, indices: Iterable[int]) -> Iterator[PixelBuffer]:
    """Yield frames one-by-one in the order of ``indices``."""

    for index in indices:
        logger.debug("Extracting frame %s at cell %s", index, grid.cell_position(geometry, index))
        yield extract_frame(sheet, geometry, index)


def extract_frames(sheet: PixelBuffer, geometry: GridGeometry, indices: Iterable[int]) -> List[PixelBuffer]:
    """Extract frames eagerly."""

    frames = list(iter_frames(sheet, geometry, indices))
    if not frames:
        raise GeometryError("No frames could be extracted from the sheet.")
    logger.debug("Extracted %s frames of %sx%s", len(frames), geometry.frame_width, geometry.frame_height)
    return frames
