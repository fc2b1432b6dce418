import numpy as np
import pytest

from pixpool.buffer import PixelBuffer


@pytest.fixture
def noise_rgb():
    """Deterministic 13x9 RGB image with every value in play."""
    rng = np.random.default_rng(1234)
    return PixelBuffer(rng.integers(0, 256, size=(9, 13, 3), dtype=np.uint8))


@pytest.fixture
def gradient_gray():
    """4x4 single-channel image with value 10*y + x."""
    y, x = np.mgrid[0:4, 0:4]
    return PixelBuffer.from_array(10 * y + x)
