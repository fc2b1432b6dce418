"""Abstract base class for row-partitioned image kernels."""

import time
from abc import ABC, abstractmethod
from functools import partial

import numpy as np

from pixpool.buffer import PixelBuffer
from pixpool.conv.params import KernelParameters
from pixpool.logging_config import get_logger
from pixpool.parallel.dispatcher import ParallelDispatcher
from pixpool.parallel.partition import RowRange, partition

logger = get_logger("conv")


class Kernel(ABC):
    """Base class for transforms that fill a destination buffer row range by row range."""

    name: str = "kernel"
    params: KernelParameters

    def __init__(self, params: KernelParameters) -> None:
        """Initialize Kernel class.

        Args:
            params (KernelParameters): Read-only parameters shared by every worker.
        """
        self.params = params

    def output_size(self, src: PixelBuffer) -> tuple[int, int]:
        """Destination (width, height) for the given source."""
        return src.width, src.height

    @abstractmethod
    def process_rows(self, src: PixelBuffer, dst: PixelBuffer, row_range: RowRange) -> None:
        """Write destination rows ``[row_range.start, row_range.end)``.

        Args:
            src (PixelBuffer): Source image, never modified.
            dst (PixelBuffer): Destination image.
            row_range (RowRange): Destination rows owned by this worker.
        """
        pass

    def run(self, src: PixelBuffer, dst: PixelBuffer, workers: int) -> PixelBuffer:
        """Run the kernel over the whole destination using ``workers`` threads.

        Args:
            src (PixelBuffer): Image to transform.
            dst (PixelBuffer): Pre-sized output buffer, distinct from ``src``.
            workers (int): Number of row ranges to split the destination into.

        Returns:
            PixelBuffer: ``dst``, fully populated.
        """
        width, height = self.output_size(src)
        if dst.shape != (height, width, src.channels):
            raise ValueError(
                f"{self.name}: destination shape {dst.shape} does not match "
                f"expected {(height, width, src.channels)}"
            )
        if np.shares_memory(dst.pixels, src.pixels):
            raise ValueError(f"{self.name}: source and destination must be distinct buffers")

        ranges = partition(height, workers)

        start_time = time.perf_counter()
        ParallelDispatcher().run(ranges, partial(self.process_rows, src, dst))
        end_time = time.perf_counter()

        logger.info(
            f"{self.name} on {src.width}x{src.height}x{src.channels} with "
            f"{max(1, workers)} worker(s) took {end_time - start_time:.6f} seconds."
        )
        return dst
