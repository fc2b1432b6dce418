"""Apply a sequence of transforms, swapping source and destination buffers."""

from dataclasses import dataclass
from typing import Sequence, TypeAlias

from pixpool.buffer import PixelBuffer
from pixpool.config import BLUR_PRESETS, BOX_BLUR_SIZE
from pixpool.conv import (
    ConvolutionKernel,
    ConvolutionParameters,
    ResizeKernel,
    ResizeParameters,
    RotationKernel,
    RotationParameters,
    SobelKernel,
)
from pixpool.logging_config import get_logger

logger = get_logger("pipeline")


@dataclass(frozen=True)
class Blur:
    strength: str = "light"

    def __post_init__(self) -> None:
        if self.strength not in BLUR_PRESETS:
            raise ValueError(
                f"Unknown blur strength {self.strength!r}, expected one of {sorted(BLUR_PRESETS)}"
            )

    @property
    def passes(self) -> int:
        return BLUR_PRESETS[self.strength]


@dataclass(frozen=True)
class Sobel:
    pass


@dataclass(frozen=True)
class Rotate:
    angle_degrees: float


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


Operation: TypeAlias = Blur | Sobel | Rotate | Resize


class Pipeline:
    """Runs operations in order on a working pair of buffers.

    The caller's buffer is never written; the first step reads it and writes
    into a scratch buffer, and every later step swaps the pair.
    """

    workers: int

    def __init__(self, workers: int) -> None:
        self.workers = max(1, workers)

    def apply(self, image: PixelBuffer, operations: Sequence[Operation]) -> PixelBuffer:
        src = image
        spare: PixelBuffer | None = None

        for operation in operations:
            logger.info(f"Applying {operation}")
            if isinstance(operation, Resize):
                dst = PixelBuffer.allocate(operation.width, operation.height, src.channels)
                ResizeKernel(ResizeParameters(operation.width, operation.height)).run(
                    src, dst, self.workers
                )
                src, spare = dst, None
                continue

            kernel, passes = self._kernel_for(operation, src)
            for _ in range(passes):
                if spare is None or not spare.same_shape_as(src) or spare is image:
                    spare = PixelBuffer.allocate(src.width, src.height, src.channels)
                kernel.run(src, spare, self.workers)
                src, spare = spare, src

        return src if src is not image else image.copy()

    @staticmethod
    def _kernel_for(operation: Operation, src: PixelBuffer):
        if isinstance(operation, Blur):
            return ConvolutionKernel(ConvolutionParameters.box(BOX_BLUR_SIZE)), operation.passes
        if isinstance(operation, Sobel):
            return SobelKernel(), 1
        if isinstance(operation, Rotate):
            params = RotationParameters.from_degrees(operation.angle_degrees, src.width, src.height)
            return RotationKernel(params), 1
        raise TypeError(f"Unsupported operation {operation!r}")
