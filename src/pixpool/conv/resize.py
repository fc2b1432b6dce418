"""Bilinear resize with center-aligned sample positions."""

import numpy as np

from pixpool.buffer import PixelBuffer
from pixpool.conv.abstract import Kernel
from pixpool.conv.params import ResizeParameters
from pixpool.conv.sampler import bilinear
from pixpool.parallel.partition import RowRange


class ResizeKernel(Kernel):
    """Maps destination pixel centers onto source pixel centers and samples bilinearly."""

    name = "resize"
    params: ResizeParameters

    def output_size(self, src: PixelBuffer) -> tuple[int, int]:
        return self.params.target_width, self.params.target_height

    def run(self, src: PixelBuffer, dst: PixelBuffer, workers: int) -> PixelBuffer:
        if (src.width == 0 or src.height == 0) and self.params.target_width and self.params.target_height:
            raise ValueError("Cannot resize an empty image")
        return super().run(src, dst, workers)

    def process_rows(self, src: PixelBuffer, dst: PixelBuffer, row_range: RowRange) -> None:
        if row_range.empty or self.params.target_width == 0:
            return
        scale_x = src.width / self.params.target_width
        scale_y = src.height / self.params.target_height

        xs = (np.arange(self.params.target_width, dtype=np.float64) + 0.5) * scale_x - 0.5
        ys = (np.arange(row_range.start, row_range.end, dtype=np.float64) + 0.5) * scale_y - 0.5
        grid_x, grid_y = np.meshgrid(xs, ys)
        dst.rows(row_range.start, row_range.end)[...] = bilinear(src.pixels, grid_x, grid_y)


def resize(src: PixelBuffer, dst: PixelBuffer, workers: int = 1) -> PixelBuffer:
    """Resample ``src`` to the dimensions of ``dst``."""
    params = ResizeParameters(dst.width, dst.height)
    return ResizeKernel(params).run(src, dst, workers)
