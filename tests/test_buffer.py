import numpy as np
import pytest

from pixpool.buffer import PixelBuffer
from pixpool.errors import AllocationFailure


def test_allocate_is_zeroed_with_exact_size():
    buf = PixelBuffer.allocate(5, 3, 4)
    assert buf.shape == (3, 5, 4)
    assert buf.width == 5 and buf.height == 3 and buf.channels == 4
    assert len(buf.data) == 5 * 3 * 4
    assert not buf.data.any()


def test_offset_layout_and_accessors():
    buf = PixelBuffer.allocate(4, 3, 2)
    assert buf.offset(2, 1, 1) == (2 * 4 + 1) * 2 + 1

    buf.set(2, 1, 1, 200)
    assert buf.get(2, 1, 1) == 200
    assert buf.pixels[2, 1, 1] == 200
    assert buf.data[buf.offset(2, 1, 1)] == 200


@pytest.mark.parametrize("coords", [(3, 0, 0), (0, 4, 0), (0, 0, 2), (-1, 0, 0)])
def test_out_of_range_access_raises(coords):
    buf = PixelBuffer.allocate(4, 3, 2)
    with pytest.raises(IndexError):
        buf.get(*coords)


def test_set_rejects_values_outside_byte_range():
    buf = PixelBuffer.allocate(1, 1, 1)
    with pytest.raises(IndexError):
        buf.set(0, 0, 0, 256)


def test_from_array_adds_channel_axis_and_clips():
    buf = PixelBuffer.from_array(np.array([[-5.0, 300.0], [12.0, 255.0]]))
    assert buf.shape == (2, 2, 1)
    assert buf.pixels[:, :, 0].tolist() == [[0, 255], [12, 255]]


def test_invalid_construction():
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((2, 2, 1), dtype=np.float32))
    with pytest.raises(ValueError):
        PixelBuffer(np.zeros((2, 2), dtype=np.uint8))
    with pytest.raises(ValueError):
        PixelBuffer.allocate(-1, 2, 3)
    with pytest.raises(ValueError):
        PixelBuffer.allocate(2, 2, 0)


def test_allocation_failure_is_reported(monkeypatch):
    def explode(*args, **kwargs):
        raise MemoryError()

    monkeypatch.setattr(np, "zeros", explode)
    with pytest.raises(AllocationFailure):
        PixelBuffer.allocate(10, 10, 3)


def test_copy_is_independent(noise_rgb):
    clone = noise_rgb.copy()
    assert clone == noise_rgb
    clone.pixels[0, 0, 0] ^= 0xFF
    assert clone != noise_rgb


def test_copy_into_requires_same_shape(noise_rgb):
    target = PixelBuffer.allocate(noise_rgb.width, noise_rgb.height, noise_rgb.channels)
    noise_rgb.copy_into(target)
    assert target == noise_rgb

    with pytest.raises(ValueError):
        noise_rgb.copy_into(PixelBuffer.allocate(1, 1, 3))
