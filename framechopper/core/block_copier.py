"""Strided block copy between flat pixel buffers."""

from __future__ import annotations

from typing import MutableSequence, Sequence

import numpy as np


def _check_extent(name: str, length: int, offset: int, row_stride: int, row_byte_width: int, row_count: int) -> None:
    if offset < 0:
        raise ValueError(f"{name} offset must not be negative (got {offset})")
    if row_byte_width > row_stride:
        raise ValueError(f"Row width {row_byte_width} exceeds {name} row stride {row_stride}")
    end = offset + (row_count - 1) * row_stride + row_byte_width
    if end > length:
        raise ValueError(f"Copy would read or write {name} bytes up to {end}, buffer holds {length}")


def copy_block(
    source: Sequence[int],
    source_offset: int,
    source_row_stride: int,
    dest: MutableSequence[int],
    dest_offset: int,
    dest_row_stride: int,
    row_byte_width: int,
    row_count: int,
) -> None:
    """Copy ``row_count`` rows of ``row_byte_width`` bytes from ``source`` into ``dest``.

    After each row the source cursor moves by ``source_row_stride`` and the
    destination cursor by ``dest_row_stride``, so the same call crops a frame
    out of a sheet or packs a frame into one. Bounds are checked up front and
    nothing is written when they do not hold.
    """

    if row_count <= 0 or row_byte_width <= 0:
        return
    if source is dest or (
        isinstance(source, np.ndarray) and isinstance(dest, np.ndarray) and np.shares_memory(source, dest)
    ):
        raise ValueError("Source and destination must be distinct buffers")
    _check_extent("source", len(source), source_offset, source_row_stride, row_byte_width, row_count)
    _check_extent("destination", len(dest), dest_offset, dest_row_stride, row_byte_width, row_count)

    src = source_offset
    dst = dest_offset
    for _ in range(row_count):
        dest[dst : dst + row_byte_width] = source[src : src + row_byte_width]
        src += source_row_stride
        dst += dest_row_stride
