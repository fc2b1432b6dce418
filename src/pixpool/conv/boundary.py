"""Coordinate handling for neighbor lookups that can leave the image."""

import numpy as np


def clamp_indices(indices: np.ndarray, size: int) -> np.ndarray:
    """Replicate-border: move every index onto the nearest valid one in ``[0, size)``."""
    return np.clip(indices, 0, size - 1)


def inside(indices: np.ndarray, size: int) -> np.ndarray:
    """Mask of indices that fall inside ``[0, size)``; used for zero-padding."""
    return (indices >= 0) & (indices < size)
