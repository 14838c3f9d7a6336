import numpy as np
from scipy.fft import dctn

BLOCK_SIZE = 8
HALF_WIDTH = 4
SIGNATURE_LENGTH = 10

# (vertical frequency, horizontal frequency), zig-zag order starting downwards
COEFFICIENTS = [
    (0, 0),
    (1, 0),
    (0, 1),
    (0, 2),
    (1, 1),
    (2, 0),
    (3, 0),
    (2, 1),
    (1, 2),
    (0, 3),
]
_ROWS = np.array([v for v, _ in COEFFICIENTS])
_COLS = np.array([h for _, h in COEFFICIENTS])


def block_from_pixels(pixels) -> np.ndarray:
    """Normalize 8-bit intensities to the [-1, 1) range used by signatures."""
    return np.asarray(pixels, dtype=np.float64) / 128.0 - 1.0


def _signature(samples: np.ndarray, scale: float) -> tuple[float, ...]:
    # scipy's unnormalized DCT-II doubles every axis; undo it so the DC term is the plain sum
    coeffs = dctn(samples, type=2) / 4.0 * scale
    picked = coeffs[_ROWS, _COLS].astype(np.float32)
    return tuple(float(v) for v in picked)


def dct_4x8_signature(block: np.ndarray) -> tuple[float, ...]:
    """Signature of the left half (4 columns x 8 rows) of an 8x8 block."""
    block = np.asarray(block, dtype=np.float64)
    if block.shape[0] != BLOCK_SIZE or block.shape[1] < HALF_WIDTH:
        raise ValueError(f"Expected an 8-row block at least 4 wide, got {block.shape}")
    return _signature(block[:, :HALF_WIDTH], 1.0)


def dct_8x8_signature(block: np.ndarray) -> tuple[float, ...]:
    """Signature of a full 8x8 block.

    Scaled by one half so a block of uniform intensity lands on the same
    DC value as its 4x8 half, keeping both variants comparable.
    """
    block = np.asarray(block, dtype=np.float64)
    if block.shape != (BLOCK_SIZE, BLOCK_SIZE):
        raise ValueError(f"Expected an 8x8 block, got {block.shape}")
    return _signature(block, 0.5)
