"""Per-pixel colour transforms."""

import cv2
import numpy as np

from models.image_buffer import ImageBuffer, PIXEL_DTYPE
from utils.constants import RED, SEPIA_MATRIX, MAX_VALUE


def _require_colour(src: ImageBuffer, name: str) -> None:
    src.require_not_empty(name)
    if src.channels != 3:
        raise ValueError(f"{name} needs a 3-channel RGB image, got {src.channels} channels")


def greyscale(src: ImageBuffer) -> ImageBuffer:
    """Every channel set to the inverted red value."""
    _require_colour(src, "greyscale")
    inverted_red = MAX_VALUE - src.data[:, :, RED]
    dst = src.clone()
    dst.data[:] = inverted_red[:, :, np.newaxis]
    return dst


def luma_greyscale(src: ImageBuffer) -> ImageBuffer:
    """Single-channel BT.601 luma via OpenCV."""
    _require_colour(src, "luma_greyscale")
    return ImageBuffer(cv2.cvtColor(src.data, cv2.COLOR_RGB2GRAY))


def sepia_tone(src: ImageBuffer) -> ImageBuffer:
    """Sepia colour matrix; results rounded half-to-even and saturated at 255."""
    _require_colour(src, "sepia_tone")
    toned = src.data.astype(np.float64) @ SEPIA_MATRIX.T
    return ImageBuffer(np.clip(np.rint(toned), 0, MAX_VALUE).astype(PIXEL_DTYPE))


def adjust_brightness(src: ImageBuffer, factor: float) -> ImageBuffer:
    """Scale every channel by factor, rounded and clamped to [0, 255]."""
    src.require_not_empty("adjust_brightness")
    scaled = np.rint(src.data.astype(np.float64) * factor)
    return ImageBuffer(np.clip(scaled, 0, MAX_VALUE).astype(src.dtype))


def negative(src: ImageBuffer) -> ImageBuffer:
    src.require_not_empty("negative")
    return ImageBuffer(MAX_VALUE - src.data)
