"""Decode and encode sprite sheets with Pillow."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image, UnidentifiedImageError

from . import PixelBuffer
from .errors import DecodeError, EncodeError
from ..utils import file_tools, validators

logger = logging.getLogger(__name__)


def decode_sheet(path: Path) -> PixelBuffer:
    """Load an image file as a flat RGBA buffer."""

    validated_path = validators.validate_image_path(path)
    logger.info("Loading %s file", validated_path)
    try:
        with Image.open(validated_path) as image:
            rgba = image.convert("RGBA")
    except UnidentifiedImageError as exc:
        raise DecodeError(validated_path, reason="Unrecognized image format") from exc
    except (OSError, Image.DecompressionBombError) as exc:
        raise DecodeError(validated_path, reason=str(exc)) from exc

    data = np.frombuffer(rgba.tobytes(), dtype=np.uint8).copy()
    return PixelBuffer(rgba.width, rgba.height, data)


def encode_sheet(path: Path, sheet: PixelBuffer) -> Path:
    """Write a buffer to ``path`` as PNG."""

    try:
        file_tools.ensure_directory(path.parent)
        image = Image.frombytes("RGBA", sheet.size, sheet.data.tobytes())
        image.save(path, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodeError(path, reason=str(exc)) from exc
    logger.debug("Wrote %sx%s sheet to %s", sheet.width, sheet.height, path)
    return path
