"""Chop a sprite sheet: decode, select, extract, compose, encode."""

from __future__ import annotations

import logging

from . import ChopSettings, FramePlacement, GridGeometry, ProcessingOutcome
from . import frame_extractor, grid, image_codec, sheet_composer
from .errors import EncodeError
from ..utils import validators

logger = logging.getLogger(__name__)


def plan_placements(indices: list[int], layout: GridGeometry) -> list[FramePlacement]:
    """Describe where each selected source frame goes in the output grid."""

    placements = []
    for cell, index in enumerate(indices):
        x, y = grid.cell_position(layout, cell)
        placements.append(FramePlacement(index=index, x=x, y=y, width=layout.frame_width, height=layout.frame_height))
    return placements


def chop_sheet(settings: ChopSettings) -> ProcessingOutcome:
    """Run the whole re-tiling for one input sheet."""

    validators.validate_grid(settings.columns, settings.rows)
    validators.validate_layout(settings.max_output_columns, settings.frame_step)

    sheet = image_codec.decode_sheet(settings.input_path)
    source = grid.source_geometry(sheet.width, sheet.height, settings.columns, settings.rows)
    logger.info(
        "Loaded successfully: %sx%s size with %s frames of %sx%s",
        sheet.width,
        sheet.height,
        grid.frame_total(source),
        source.frame_width,
        source.frame_height,
    )

    indices = grid.select_frame_indices(grid.frame_total(source), settings.frame_step)
    layout = grid.output_geometry(source.frame_width, source.frame_height, len(indices), settings.max_output_columns)
    placements = plan_placements(indices, layout)
    output_width, output_height = grid.sheet_size(layout)

    if settings.dry_run:
        logger.info(
            "Dry run: would save %s file: %sx%s, %s frames in %sx%s cells",
            settings.output_path,
            output_width,
            output_height,
            len(indices),
            layout.columns,
            layout.rows,
        )
        return ProcessingOutcome(None, source, layout, indices, placements)

    frames = frame_extractor.extract_frames(sheet, source, indices)
    composed = sheet_composer.compose_sheet(frames, settings.max_output_columns)

    logger.info(
        "Saving %s file: %sx%s, %s frames in total",
        settings.output_path,
        composed.width,
        composed.height,
        len(frames),
    )
    try:
        saved_path = image_codec.encode_sheet(settings.output_path, composed)
    except EncodeError as exc:
        if settings.strict_save:
            raise
        logger.error("%s", exc)
        saved_path = None

    return ProcessingOutcome(saved_path, source, layout, indices, placements)
