"""Sobel gradient magnitude on zero-padded luminance."""

import numpy as np

from pixpool.buffer import PixelBuffer
from pixpool.conv.abstract import Kernel
from pixpool.conv.boundary import clamp_indices, inside
from pixpool.conv.params import SobelParameters
from pixpool.parallel.partition import RowRange

SOBEL_HORIZONTAL = np.array([[-1, 0, 1], [-2, 0, 2], [-1, 0, 1]], dtype=np.int64)
SOBEL_VERTICAL = np.array([[1, 2, 1], [0, 0, 0], [-1, -2, -1]], dtype=np.int64)

LUMA_WEIGHTS = np.array([0.30, 0.59, 0.11], dtype=np.float32)


def to_luminance(pixels: np.ndarray) -> np.ndarray:
    """Byte luminance of each pixel, truncated like an integer cast.

    Images with fewer than three channels pass channel 0 through.
    """
    if pixels.shape[-1] < 3:
        return pixels[..., 0].copy()
    rgb = pixels[..., :3].astype(np.float32)
    gray = rgb[..., 0] * LUMA_WEIGHTS[0] + rgb[..., 1] * LUMA_WEIGHTS[1] + rgb[..., 2] * LUMA_WEIGHTS[2]
    return gray.astype(np.uint8)


class SobelKernel(Kernel):
    """Edge magnitude written to every channel, so the output is always gray."""

    name = "sobel"

    def __init__(self, params: SobelParameters | None = None) -> None:
        super().__init__(params or SobelParameters())

    def process_rows(self, src: PixelBuffer, dst: PixelBuffer, row_range: RowRange) -> None:
        if row_range.empty:
            return
        rows = np.arange(row_range.start, row_range.end)
        cols = np.arange(src.width)

        # luminance of the rows this range reads, one row of context on each side
        first = max(row_range.start - 1, 0)
        last = min(row_range.end + 1, src.height)
        gray = to_luminance(src.pixels[first:last]).astype(np.int64)

        gx = np.zeros((len(rows), src.width), dtype=np.int64)
        gy = np.zeros_like(gx)
        for dy in (-1, 0, 1):
            yy = rows + dy
            y_ok = inside(yy, src.height)
            local_y = clamp_indices(yy, src.height) - first
            for dx in (-1, 0, 1):
                xx = cols + dx
                x_ok = inside(xx, src.width)
                xx = clamp_indices(xx, src.width)
                neighbor = np.where(
                    y_ok[:, np.newaxis] & x_ok[np.newaxis, :],
                    gray[local_y[:, np.newaxis], xx],
                    0,
                )
                gx += SOBEL_HORIZONTAL[dy + 1, dx + 1] * neighbor
                gy += SOBEL_VERTICAL[dy + 1, dx + 1] * neighbor

        magnitude = np.floor(np.sqrt((gx * gx + gy * gy).astype(np.float64)) + 0.5)
        edges = np.minimum(magnitude, 255).astype(np.uint8)
        dst.rows(row_range.start, row_range.end)[...] = edges[..., np.newaxis]


def detect_edges(src: PixelBuffer, dst: PixelBuffer, workers: int = 1) -> PixelBuffer:
    """Write the Sobel edge magnitude of ``src`` into ``dst``."""
    return SobelKernel().run(src, dst, workers)
