import numpy as np
import pytest

from pixpool.buffer import PixelBuffer
from pixpool.conv.convolution import ConvolutionKernel, convolve
from pixpool.conv.params import ConvolutionParameters


def _blank_like(src):
    return PixelBuffer.allocate(src.width, src.height, src.channels)


def test_one_by_one_identity(noise_rgb):
    dst = _blank_like(noise_rgb)
    convolve(noise_rgb, dst, [1.0], 1, factor=1.0, bias=0.0, workers=3)
    assert dst == noise_rgb


def test_box_blur_keeps_uniform_color():
    src = PixelBuffer(np.full((6, 7, 3), (17, 130, 250), dtype=np.uint8))
    dst = _blank_like(src)
    ConvolutionKernel(ConvolutionParameters.box(3)).run(src, dst, workers=2)
    assert dst == src


def test_replicate_border_on_single_row():
    # [0, 90] with a horizontal [1, 1, 1]/3 kernel: edges repeat themselves
    src = PixelBuffer.from_array(np.array([[0, 90]]))
    dst = _blank_like(src)
    weights = [0, 0, 0, 1 / 3, 1 / 3, 1 / 3, 0, 0, 0]
    convolve(src, dst, weights, 3)
    assert dst.pixels[0, :, 0].tolist() == [30, 60]


def test_factor_bias_and_clamp():
    src = PixelBuffer.from_array(np.array([[10, 100, 200]]))
    dst = _blank_like(src)
    convolve(src, dst, [1.0], 1, factor=2.0, bias=-30.0)
    assert dst.pixels[0, :, 0].tolist() == [0, 170, 255]


def test_rounds_half_away_from_zero():
    src = PixelBuffer.from_array(np.array([[5, 7]]))
    dst = _blank_like(src)
    convolve(src, dst, [0.5], 1)
    assert dst.pixels[0, :, 0].tolist() == [3, 4]


def test_channels_do_not_mix():
    src = PixelBuffer(np.zeros((3, 3, 2), dtype=np.uint8))
    src.pixels[:, :, 1] = 255
    dst = _blank_like(src)
    ConvolutionKernel(ConvolutionParameters.box(3)).run(src, dst, workers=1)
    assert not dst.pixels[:, :, 0].any()
    assert (dst.pixels[:, :, 1] == 255).all()


def test_source_is_not_modified(noise_rgb):
    before = noise_rgb.copy()
    convolve(noise_rgb, _blank_like(noise_rgb), [1 / 25] * 25, 5, workers=4)
    assert noise_rgb == before


def test_output_independent_of_worker_count(noise_rgb):
    params = ConvolutionParameters.from_matrix([[0, -1, 0], [-1, 5, -1], [0, -1, 0]])
    outputs = []
    for workers in (1, 2, 5):
        dst = _blank_like(noise_rgb)
        ConvolutionKernel(params).run(noise_rgb, dst, workers)
        outputs.append(dst)
    assert outputs[0] == outputs[1] == outputs[2]


@pytest.mark.parametrize("weights,size", [([1, 1, 1, 1], 2), ([1, 1], 1), ([], 0)])
def test_invalid_kernel_rejected(weights, size):
    with pytest.raises(ValueError):
        ConvolutionParameters(tuple(weights), size)


def test_destination_shape_checked(noise_rgb):
    with pytest.raises(ValueError):
        convolve(noise_rgb, PixelBuffer.allocate(2, 2, 3), [1.0], 1)
    with pytest.raises(ValueError):
        convolve(noise_rgb, noise_rgb, [1.0], 1)


def test_kernel_is_applied_without_flipping():
    # only the weight right of center is set, so each pixel takes its right neighbor
    src = PixelBuffer.from_array(np.array([[10, 20, 30]]))
    dst = _blank_like(src)
    convolve(src, dst, [0, 0, 0, 0, 0, 1, 0, 0, 0], 3)
    assert dst.pixels[0, :, 0].tolist() == [20, 30, 30]


def test_kernel_rows_are_not_flipped():
    src = PixelBuffer.from_array(np.array([[10], [20], [30]]))
    dst = _blank_like(src)
    convolve(src, dst, [0, 1, 0, 0, 0, 0, 0, 0, 0], 3)
    assert dst.pixels[:, 0, 0].tolist() == [10, 10, 20]


def test_destination_viewing_source_rejected(noise_rgb):
    with pytest.raises(ValueError):
        convolve(noise_rgb, PixelBuffer(noise_rgb.pixels[:]), [1.0], 1)
