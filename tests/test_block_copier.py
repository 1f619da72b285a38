import numpy as np
import pytest

from framechopper.core.block_copier import copy_block


def test_copy_block_crops_from_wider_buffer():
    source = np.arange(32, dtype=np.uint8)  # 4x2 pixels, stride 16
    dest = np.zeros(16, dtype=np.uint8)  # 2x2 pixels, stride 8

    copy_block(source, 4, 16, dest, 0, 8, 8, 2)

    assert dest[:8].tolist() == list(range(4, 12))
    assert dest[8:].tolist() == list(range(20, 28))


def test_copy_block_packs_into_wider_buffer():
    source = np.arange(1, 17, dtype=np.uint8)
    dest = np.zeros(32, dtype=np.uint8)

    copy_block(source, 0, 8, dest, 8, 16, 8, 2)

    assert dest[:8].tolist() == [0] * 8
    assert dest[8:16].tolist() == list(range(1, 9))
    assert dest[16:24].tolist() == [0] * 8
    assert dest[24:].tolist() == list(range(9, 17))


def test_copy_block_accepts_bytearrays():
    source = bytearray(b"abcdefgh")
    dest = bytearray(4)

    copy_block(source, 2, 4, dest, 0, 2, 2, 2)

    assert bytes(dest) == b"cdgh"


def test_copy_block_rejects_out_of_bounds_without_writing():
    source = np.full(16, 7, dtype=np.uint8)
    dest = np.zeros(16, dtype=np.uint8)

    with pytest.raises(ValueError):
        copy_block(source, 0, 8, dest, 8, 8, 8, 2)
    assert not dest.any()

    with pytest.raises(ValueError):
        copy_block(source, 12, 8, dest, 0, 8, 8, 1)
    assert not dest.any()


def test_copy_block_rejects_rows_wider_than_stride():
    source = np.zeros(32, dtype=np.uint8)
    dest = np.zeros(32, dtype=np.uint8)

    with pytest.raises(ValueError):
        copy_block(source, 0, 4, dest, 0, 16, 8, 2)
    with pytest.raises(ValueError):
        copy_block(source, 0, 16, dest, 0, 4, 8, 2)


def test_copy_block_rejects_same_buffer():
    buffer = np.zeros(32, dtype=np.uint8)

    with pytest.raises(ValueError):
        copy_block(buffer, 0, 8, buffer, 16, 8, 8, 1)


def test_copy_block_zero_rows_is_noop():
    dest = np.zeros(4, dtype=np.uint8)

    copy_block(np.ones(4, dtype=np.uint8), 0, 4, dest, 0, 4, 4, 0)

    assert not dest.any()


def test_copy_block_rejects_overlapping_views():
    buffer = np.zeros(32, dtype=np.uint8)

    with pytest.raises(ValueError):
        copy_block(buffer[:16], 0, 8, buffer[8:], 0, 8, 8, 1)
    with pytest.raises(ValueError):
        copy_block(buffer, 0, 8, buffer.reshape(4, 8)[1], 0, 8, 8, 1)
