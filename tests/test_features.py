import numpy as np
import pytest

from shoalart.features import SIGNATURE_LENGTH, block_from_pixels, dct_4x8_signature, dct_8x8_signature

BLACK = (-32.0,) + (0.0,) * (SIGNATURE_LENGTH - 1)


def test_block_from_pixels_range():
    block = block_from_pixels(np.array([[0, 128, 255]], dtype=np.uint8))
    np.testing.assert_allclose(block, [[-1.0, 0.0, 0.9921875]])


def test_black_block_half_signature():
    block = np.full((8, 8), -1.0)
    assert dct_4x8_signature(block) == pytest.approx(BLACK, abs=1e-5)


def test_black_block_full_signature_shares_scale():
    block = np.full((8, 8), -1.0)
    assert dct_8x8_signature(block) == pytest.approx(BLACK, abs=1e-5)


def test_signature_length():
    rng = np.random.default_rng(7)
    block = rng.uniform(-1.0, 1.0, (8, 8))
    assert len(dct_4x8_signature(block)) == SIGNATURE_LENGTH
    assert len(dct_8x8_signature(block)) == SIGNATURE_LENGTH


def test_deterministic():
    rng = np.random.default_rng(3)
    block = rng.uniform(-1.0, 1.0, (8, 8))
    assert dct_4x8_signature(block) == dct_4x8_signature(block.copy())
    assert dct_8x8_signature(block) == dct_8x8_signature(block.copy())


def test_dc_is_sum_of_half():
    block = np.full((8, 8), -1.0)
    block[:, :4] = 0.5
    assert dct_4x8_signature(block)[0] == pytest.approx(0.5 * 32)


def test_half_signature_ignores_right_columns():
    a = np.full((8, 8), -1.0)
    b = a.copy()
    b[:, 4:] = 0.9
    assert dct_4x8_signature(a) == dct_4x8_signature(b)


def test_left_heavy_block_has_positive_horizontal_term():
    block = np.full((8, 8), -1.0)
    block[:, :2] = 0.9
    mirrored = block.copy()
    mirrored[:, :4] = block[:, 3::-1]
    assert dct_4x8_signature(block)[2] > 0
    assert dct_4x8_signature(mirrored)[2] == pytest.approx(-dct_4x8_signature(block)[2], abs=1e-5)


def test_top_heavy_block_has_positive_vertical_term():
    block = np.full((8, 8), -1.0)
    block[:2, :] = 0.9
    half = dct_4x8_signature(block)
    full = dct_8x8_signature(block)
    assert half[1] > 0
    assert full[1] > 0
    assert half[2] == pytest.approx(0.0, abs=1e-5)


def test_wrong_shapes_rejected():
    with pytest.raises(ValueError):
        dct_8x8_signature(np.zeros((8, 4)))
    with pytest.raises(ValueError):
        dct_4x8_signature(np.zeros((4, 8)))
