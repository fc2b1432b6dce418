"""Per-transform parameter records."""

import math
from dataclasses import dataclass
from typing import Sequence, TypeAlias


@dataclass(frozen=True)
class ConvolutionParameters:
    """Square ``size x size`` weight matrix in row-major order."""

    weights: tuple[float, ...]
    size: int
    factor: float = 1.0
    bias: float = 0.0

    def __post_init__(self) -> None:
        if self.size < 1 or self.size % 2 == 0:
            raise ValueError(f"Kernel size must be a positive odd integer, got {self.size}")
        if len(self.weights) != self.size * self.size:
            raise ValueError(
                f"Expected {self.size * self.size} weights for a {self.size}x{self.size} kernel, "
                f"got {len(self.weights)}"
            )
        object.__setattr__(self, "weights", tuple(float(w) for w in self.weights))

    @classmethod
    def from_matrix(cls, matrix: Sequence[Sequence[float]], factor: float = 1.0, bias: float = 0.0):
        size = len(matrix)
        weights = tuple(w for row in matrix for w in row)
        return cls(weights, size, factor, bias)

    @classmethod
    def box(cls, size: int = 3) -> "ConvolutionParameters":
        """Normalized box blur, every weight ``1 / size**2``."""
        return cls((1.0 / (size * size),) * (size * size), size)

    @property
    def radius(self) -> int:
        return self.size // 2


@dataclass(frozen=True)
class SobelParameters:
    pass


@dataclass(frozen=True)
class RotationParameters:
    angle_radians: float
    center_x: float
    center_y: float

    @classmethod
    def from_degrees(cls, angle_degrees: float, width: int, height: int) -> "RotationParameters":
        """Rotation about the image center; whole turns collapse to 0."""
        angle = math.radians(angle_degrees % 360.0)
        return cls(angle, (width - 1) / 2.0, (height - 1) / 2.0)


@dataclass(frozen=True)
class ResizeParameters:
    target_width: int
    target_height: int

    def __post_init__(self) -> None:
        if self.target_width < 0 or self.target_height < 0:
            raise ValueError(
                f"Invalid target size {self.target_width}x{self.target_height}"
            )


KernelParameters: TypeAlias = (
    ConvolutionParameters | SobelParameters | RotationParameters | ResizeParameters
)
