"""Image buffer: a row-major (H, W, C) pixel grid with indexed and scanline access."""

import numpy as np
from typing import Tuple

PIXEL_DTYPE = np.uint8
GRADIENT_DTYPE = np.int16


class EmptyImageError(ValueError):
    """Raised when an operation receives a buffer with no pixels."""


class ImageBuffer:
    """
    Dense image storage backed by a C-contiguous numpy array.

    Pixels are stored row-major, each pixel a run of ``channels`` elements.
    Two access idioms are supported: element-wise ``at``/``put`` and
    whole-scanline ``row`` views.
    """

    def __init__(self, data: np.ndarray):
        if data.ndim == 2:
            data = data[:, :, np.newaxis]
        if data.ndim != 3:
            raise ValueError(f"Image data must be 2D or 3D, got shape {data.shape}")
        self.data = np.ascontiguousarray(data)

    @classmethod
    def allocate(cls, width: int, height: int, channels: int = 3, dtype=PIXEL_DTYPE) -> 'ImageBuffer':
        """Zero-filled buffer of the given geometry."""
        if width <= 0 or height <= 0 or channels <= 0:
            raise EmptyImageError(f"Cannot allocate {width}x{height}x{channels} buffer")
        return cls(np.zeros((height, width, channels), dtype=dtype))

    @classmethod
    def from_array(cls, array: np.ndarray, copy: bool = True) -> 'ImageBuffer':
        array = np.asarray(array)
        return cls(array.copy() if copy else array)

    @property
    def height(self) -> int:
        return self.data.shape[0]

    @property
    def width(self) -> int:
        return self.data.shape[1]

    @property
    def channels(self) -> int:
        return self.data.shape[2]

    @property
    def dtype(self) -> np.dtype:
        return self.data.dtype

    @property
    def shape(self) -> Tuple[int, int, int]:
        return self.data.shape

    @property
    def empty(self) -> bool:
        return self.data.size == 0

    def require_not_empty(self, operation: str = "operation") -> None:
        if self.empty:
            raise EmptyImageError(f"{operation}: image is empty ({self.width}x{self.height}x{self.channels})")

    def same_geometry(self, other: 'ImageBuffer') -> bool:
        return self.shape == other.shape

    def clone(self) -> 'ImageBuffer':
        """Deep copy with independent storage."""
        self.require_not_empty("clone")
        return ImageBuffer(self.data.copy())

    def row(self, y: int) -> np.ndarray:
        """Writable view of scanline y: W*C elements, pixel x channel c at x*C + c."""
        self.require_not_empty("row")
        return self.data[y].reshape(-1)

    def at(self, y: int, x: int, channel: int) -> int:
        self.require_not_empty("at")
        return int(self.data[y, x, channel])

    def put(self, y: int, x: int, channel: int, value: int) -> None:
        self.require_not_empty("put")
        self.data[y, x, channel] = value

    def to_array(self) -> np.ndarray:
        """Underlying array; squeezes the channel axis of single-channel buffers."""
        if self.channels == 1:
            return self.data[:, :, 0]
        return self.data

    def __repr__(self) -> str:
        return f"ImageBuffer({self.width}x{self.height}x{self.channels}, {self.dtype})"
