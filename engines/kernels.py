"""Separable integer kernels and their normalization divisors."""

from dataclasses import dataclass
from typing import Tuple

import numpy as np

from utils.constants import GAUSS_3_TAPS, GAUSS_5_TAPS, SOBEL_DERIVATIVE_TAPS, SOBEL_SMOOTH_TAPS


def _tap_divisor(taps: Tuple[int, ...]) -> int:
    total = sum(taps)
    return total if total != 0 else 1


@dataclass(frozen=True)
class SeparableKernel:
    """
    Kernel expressed as horizontal and vertical integer taps.

    The 2D weight grid is ``outer(vertical, horizontal)``. Each axis is
    normalized by the sum of its taps unless ``normalized`` is off, in which
    case both divisors are 1 (gradient kernels).
    """

    horizontal: Tuple[int, ...]
    vertical: Tuple[int, ...]
    normalized: bool = True

    def __post_init__(self):
        if len(self.horizontal) != len(self.vertical):
            raise ValueError("Horizontal and vertical taps must have the same length")
        if len(self.horizontal) % 2 == 0:
            raise ValueError(f"Kernel size must be odd, got {len(self.horizontal)}")

    @property
    def size(self) -> int:
        return len(self.horizontal)

    @property
    def radius(self) -> int:
        return self.size // 2

    @property
    def horizontal_divisor(self) -> int:
        return _tap_divisor(self.horizontal) if self.normalized else 1

    @property
    def vertical_divisor(self) -> int:
        return _tap_divisor(self.vertical) if self.normalized else 1

    @property
    def divisor(self) -> int:
        return self.horizontal_divisor * self.vertical_divisor

    def outer(self) -> np.ndarray:
        """2D weight grid, rows follow the vertical taps."""
        return np.outer(self.vertical, self.horizontal).astype(np.int32)

    def fits(self, height: int, width: int) -> bool:
        """True if at least one pixel can hold the full kernel footprint."""
        return height >= self.size and width >= self.size


GAUSS_5X5 = SeparableKernel(GAUSS_5_TAPS, GAUSS_5_TAPS)
GAUSS_3X3 = SeparableKernel(GAUSS_3_TAPS, GAUSS_3_TAPS)

# Positive towards the right
SOBEL_X = SeparableKernel(SOBEL_DERIVATIVE_TAPS, SOBEL_SMOOTH_TAPS, normalized=False)
# Positive upwards: the row above is weighted +1
SOBEL_Y = SeparableKernel(SOBEL_SMOOTH_TAPS, tuple(-t for t in SOBEL_DERIVATIVE_TAPS), normalized=False)
