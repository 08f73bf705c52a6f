"""Blur then quantize each channel into equal-width buckets."""

import numpy as np

from models.filter_params import BlurStrategy
from models.image_buffer import ImageBuffer, PIXEL_DTYPE
from engines.convolution import blur5x5
from utils.constants import DEFAULT_QUANTIZE_LEVELS, MAX_VALUE


def quantize_levels(data: np.ndarray, levels: int) -> np.ndarray:
    """
    Snap values to the floor of their bucket.

    Bucket width is ``255 / levels`` (not integer-divided), so with 10 levels
    a value of 127 falls in bucket 4 and becomes ``floor(4 * 25.5) = 102``.
    """
    if levels < 1:
        raise ValueError(f"Quantization levels must be >= 1, got {levels}")
    width = MAX_VALUE / levels
    buckets = np.floor(data.astype(np.float64) / width)
    return np.clip(np.floor(buckets * width), 0, MAX_VALUE).astype(PIXEL_DTYPE)


def blur_quantize(
    src: ImageBuffer,
    levels: int = DEFAULT_QUANTIZE_LEVELS,
    strategy: BlurStrategy = BlurStrategy.PRODUCTION
) -> ImageBuffer:
    src.require_not_empty("blur_quantize")
    if levels < 1:
        raise ValueError(f"Quantization levels must be >= 1, got {levels}")
    blurred = blur5x5(src, strategy)
    return ImageBuffer(quantize_levels(blurred.data, levels))
