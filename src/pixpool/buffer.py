"""Owned pixel storage shared by every transform."""

import numpy as np

from pixpool.errors import AllocationFailure


class PixelBuffer:
    """Contiguous ``(height, width, channels)`` grid of 8-bit samples.

    Pixel ``(y, x, c)`` lives at flat offset ``(y * width + x) * channels + c``.
    """

    pixels: np.ndarray

    def __init__(self, pixels: np.ndarray) -> None:
        """Wrap an existing array.

        Args:
            pixels (np.ndarray): ``uint8`` array shaped (height, width, channels).
        """
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 pixels, got {pixels.dtype}")
        if pixels.ndim != 3 or pixels.shape[2] < 1:
            raise ValueError(f"Expected (height, width, channels) array, got shape {pixels.shape}")
        self.pixels = np.ascontiguousarray(pixels)

    @classmethod
    def allocate(cls, width: int, height: int, channels: int) -> "PixelBuffer":
        """Allocate a zero-filled buffer.

        Args:
            width (int): Columns.
            height (int): Rows.
            channels (int): Samples per pixel.

        Returns:
            PixelBuffer: The new buffer.
        """
        if width < 0 or height < 0:
            raise ValueError(f"Invalid dimensions {width}x{height}")
        if channels < 1:
            raise ValueError(f"Invalid channel count {channels}")
        try:
            pixels = np.zeros((height, width, channels), dtype=np.uint8)
        except MemoryError as exc:
            raise AllocationFailure(
                f"Could not allocate {width}x{height}x{channels} buffer"
            ) from exc
        return cls(pixels)

    @classmethod
    def from_array(cls, array) -> "PixelBuffer":
        """Build a buffer from any 2-D or 3-D numeric array.

        Values are clipped to [0, 255] before the cast to ``uint8``.
        """
        arr = np.asarray(array)
        if arr.ndim == 2:
            arr = arr[:, :, np.newaxis]
        if arr.dtype != np.uint8:
            arr = np.clip(arr, 0, 255).astype(np.uint8)
        return cls(arr.copy())

    @property
    def height(self) -> int:
        """Number of rows."""
        return self.pixels.shape[0]

    @property
    def width(self) -> int:
        """Number of columns."""
        return self.pixels.shape[1]

    @property
    def channels(self) -> int:
        """Samples per pixel."""
        return self.pixels.shape[2]

    @property
    def shape(self) -> tuple[int, int, int]:
        """(height, width, channels) of the underlying array."""
        return self.pixels.shape

    @property
    def data(self) -> np.ndarray:
        """Flat view of the storage, ``width * height * channels`` long."""
        return self.pixels.reshape(-1)

    def offset(self, y: int, x: int, c: int) -> int:
        """Flat offset of one sample.

        Args:
            y (int): Row.
            x (int): Column.
            c (int): Channel.

        Returns:
            int: Index into ``data``.
        """
        self._check_bounds(y, x, c)
        return (y * self.width + x) * self.channels + c

    def get(self, y: int, x: int, c: int) -> int:
        """Read one sample.

        Args:
            y (int): Row.
            x (int): Column.
            c (int): Channel.

        Returns:
            int: Sample value in [0, 255].
        """
        return int(self.data[self.offset(y, x, c)])

    def set(self, y: int, x: int, c: int, value: int) -> None:
        """Write one sample.

        Args:
            y (int): Row.
            x (int): Column.
            c (int): Channel.
            value (int): Sample value, must be in [0, 255].
        """
        if not 0 <= value <= 255:
            raise IndexError(f"Sample value {value} outside [0, 255]")
        self.data[self.offset(y, x, c)] = value

    def rows(self, start: int, end: int) -> np.ndarray:
        """Writable view of rows ``[start, end)``.

        Args:
            start (int): First row, inclusive.
            end (int): Last row, exclusive.
        """
        return self.pixels[start:end]

    def copy(self) -> "PixelBuffer":
        """Return an independent buffer with the same pixels."""
        return PixelBuffer(self.pixels.copy())

    def copy_into(self, other: "PixelBuffer") -> None:
        """Copy these pixels into a buffer of the same shape.

        Args:
            other (PixelBuffer): Destination buffer.
        """
        if not self.same_shape_as(other):
            raise ValueError(f"Shape mismatch: {self.shape} vs {other.shape}")
        np.copyto(other.pixels, self.pixels)

    def same_shape_as(self, other: "PixelBuffer") -> bool:
        return self.shape == other.shape

    def _check_bounds(self, y: int, x: int, c: int) -> None:
        if not (0 <= y < self.height and 0 <= x < self.width and 0 <= c < self.channels):
            raise IndexError(
                f"Pixel ({y}, {x}, {c}) outside buffer of shape {self.shape}"
            )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return self.same_shape_as(other) and np.array_equal(self.pixels, other.pixels)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height}, channels={self.channels})"
