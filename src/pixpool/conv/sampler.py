"""Bilinear sampling shared by the geometric transforms."""

import numpy as np

from pixpool.conv.boundary import clamp_indices


def bilinear(pixels: np.ndarray, xf: np.ndarray, yf: np.ndarray) -> np.ndarray:
    """Sample ``pixels`` at fractional coordinates.

    The four surrounding integer coordinates are clamped to the image
    independently, the weights come from the unclamped floor, and the result
    is rounded half to even.

    Args:
        pixels (np.ndarray): Source samples shaped (height, width, channels).
        xf (np.ndarray): Fractional column coordinates, any shape.
        yf (np.ndarray): Fractional row coordinates, same shape as ``xf``.

    Returns:
        np.ndarray: ``uint8`` samples shaped ``xf.shape + (channels,)``.
    """
    height, width = pixels.shape[:2]
    x_floor = np.floor(xf)
    y_floor = np.floor(yf)
    tx = (xf - x_floor)[..., np.newaxis]
    ty = (yf - y_floor)[..., np.newaxis]

    x0 = clamp_indices(x_floor.astype(np.intp), width)
    y0 = clamp_indices(y_floor.astype(np.intp), height)
    x1 = clamp_indices(x_floor.astype(np.intp) + 1, width)
    y1 = clamp_indices(y_floor.astype(np.intp) + 1, height)

    v00 = pixels[y0, x0].astype(np.float64)
    v10 = pixels[y0, x1].astype(np.float64)
    v01 = pixels[y1, x0].astype(np.float64)
    v11 = pixels[y1, x1].astype(np.float64)

    top = v00 * (1 - tx) + v10 * tx
    bottom = v01 * (1 - tx) + v11 * tx
    return np.rint(top * (1 - ty) + bottom * ty).astype(np.uint8)
