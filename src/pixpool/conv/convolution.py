"""Square-kernel convolution with replicate borders."""

from typing import Sequence

import numpy as np

from pixpool.buffer import PixelBuffer
from pixpool.conv.abstract import Kernel
from pixpool.conv.boundary import clamp_indices
from pixpool.conv.params import ConvolutionParameters
from pixpool.parallel.partition import RowRange


class ConvolutionKernel(Kernel):
    """Weighted neighborhood sum per channel, scaled, biased and clamped to a byte."""

    name = "convolution"
    params: ConvolutionParameters
    weights: np.ndarray

    def __init__(self, params: ConvolutionParameters) -> None:
        super().__init__(params)
        self.weights = np.array(params.weights, dtype=np.float64).reshape(params.size, params.size)

    def process_rows(self, src: PixelBuffer, dst: PixelBuffer, row_range: RowRange) -> None:
        """Convolve destination rows of ``row_range``.

        Neighbors outside the image are replaced by the nearest edge pixel.
        Channels never mix.
        """
        if row_range.empty:
            return
        radius = self.params.radius
        rows = np.arange(row_range.start, row_range.end)
        cols = np.arange(src.width)

        acc = np.zeros((len(rows), src.width, src.channels), dtype=np.float64)
        for ky in range(-radius, radius + 1):
            yy = clamp_indices(rows + ky, src.height)
            for kx in range(-radius, radius + 1):
                xx = clamp_indices(cols + kx, src.width)
                acc += self.weights[ky + radius, kx + radius] * src.pixels[yy[:, np.newaxis], xx]

        # round half away from zero; negatives clamp to 0 either way
        value = np.floor(acc * self.params.factor + self.params.bias + 0.5)
        dst.rows(row_range.start, row_range.end)[...] = np.clip(value, 0, 255).astype(np.uint8)


def convolve(
    src: PixelBuffer,
    dst: PixelBuffer,
    weights: Sequence[float],
    size: int,
    factor: float = 1.0,
    bias: float = 0.0,
    workers: int = 1,
) -> PixelBuffer:
    """Convolve ``src`` into ``dst`` with a ``size x size`` row-major kernel."""
    params = ConvolutionParameters(tuple(weights), size, factor, bias)
    return ConvolutionKernel(params).run(src, dst, workers)
