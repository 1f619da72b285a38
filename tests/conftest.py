import numpy as np
import pytest
from PIL import Image

from framechopper.core import PixelBuffer


@pytest.fixture
def patterned_sheet():
    """Sheet whose bytes follow a non-repeating-per-row pattern."""

    def make(width, height):
        data = (np.arange(width * height * 4) % 251).astype(np.uint8)
        return PixelBuffer(width, height, data)

    return make


@pytest.fixture
def tiled_sheet():
    """Sheet where every byte of frame ``i`` equals ``i + 1``."""

    def make(columns, rows, frame_width, frame_height):
        pixels = np.zeros((rows * frame_height, columns * frame_width, 4), dtype=np.uint8)
        for index in range(columns * rows):
            row, col = divmod(index, columns)
            pixels[
                row * frame_height : (row + 1) * frame_height,
                col * frame_width : (col + 1) * frame_width,
            ] = index + 1
        return PixelBuffer(columns * frame_width, rows * frame_height, pixels.reshape(-1))

    return make


@pytest.fixture
def write_png():
    def write(path, sheet):
        Image.frombytes("RGBA", (sheet.width, sheet.height), sheet.data.tobytes()).save(path)
        return path

    return write
