"""Rotation about the image center by inverse mapping."""

import math

import numpy as np

from pixpool.buffer import PixelBuffer
from pixpool.conv.abstract import Kernel
from pixpool.conv.params import RotationParameters
from pixpool.conv.sampler import bilinear
from pixpool.parallel.partition import RowRange


class RotationKernel(Kernel):
    """Each destination pixel samples the source point it rotates back onto.

    Points that land outside the source are filled with 0 in every channel.
    """

    name = "rotation"
    params: RotationParameters

    def process_rows(self, src: PixelBuffer, dst: PixelBuffer, row_range: RowRange) -> None:
        if row_range.empty:
            return
        cos_a = math.cos(self.params.angle_radians)
        sin_a = math.sin(self.params.angle_radians)
        cx, cy = self.params.center_x, self.params.center_y

        xd = np.arange(src.width, dtype=np.float64)[np.newaxis, :] - cx
        yd = np.arange(row_range.start, row_range.end, dtype=np.float64)[:, np.newaxis] - cy
        xs = cos_a * xd + sin_a * yd + cx
        ys = -sin_a * xd + cos_a * yd + cy

        valid = (xs >= 0) & (xs < src.width) & (ys >= 0) & (ys < src.height)
        out = np.zeros((len(row_range), src.width, src.channels), dtype=np.uint8)
        if valid.any():
            out[valid] = bilinear(src.pixels, xs[valid], ys[valid])
        dst.rows(row_range.start, row_range.end)[...] = out


def rotate(src: PixelBuffer, dst: PixelBuffer, angle_degrees: float, workers: int = 1) -> PixelBuffer:
    """Rotate ``src`` by ``angle_degrees`` about its center into ``dst``."""
    params = RotationParameters.from_degrees(angle_degrees, src.width, src.height)
    return RotationKernel(params).run(src, dst, workers)
