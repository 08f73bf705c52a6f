"""
Integer Gaussian convolution with border pass-through.

The 5x5 blur is one algorithm with five interchangeable access strategies.
Every strategy computes the same non-negative weighted sum ``S`` per pixel
and normalizes it by floor division: 2D strategies divide once by the full
divisor, separable strategies divide by each axis divisor in turn. Since
``(S // a) // b == S // (a * b)`` the results are bit-identical.
"""

from collections import deque
from functools import partial
from typing import Callable, Dict, Tuple

import cv2
import numpy as np
from scipy import ndimage

from models.filter_params import BlurStrategy
from models.image_buffer import ImageBuffer
from engines.kernels import SeparableKernel, GAUSS_5X5, GAUSS_3X3


def horizontal_pass(data: np.ndarray, taps: Tuple[int, ...]) -> np.ndarray:
    """Weighted sum along x over the valid region; drops len(taps)-1 columns."""
    out_w = data.shape[1] - len(taps) + 1
    acc = np.zeros((data.shape[0], out_w, data.shape[2]), dtype=np.int32)
    for k, weight in enumerate(taps):
        if weight:
            acc += weight * data[:, k:k + out_w]
    return acc


def vertical_pass(data: np.ndarray, taps: Tuple[int, ...]) -> np.ndarray:
    """Weighted sum along y over the valid region; drops len(taps)-1 rows."""
    out_h = data.shape[0] - len(taps) + 1
    acc = np.zeros((out_h,) + data.shape[1:], dtype=np.int32)
    for k, weight in enumerate(taps):
        if weight:
            acc += weight * data[k:k + out_h]
    return acc


def separable_sums(data: np.ndarray, kernel: SeparableKernel) -> np.ndarray:
    """Unnormalized interior sums, shape (H - 2r, W - 2r, C)."""
    wide = data.astype(np.int32)
    return vertical_pass(horizontal_pass(wide, kernel.horizontal), kernel.vertical)


def _normalize_separable(sums: np.ndarray, kernel: SeparableKernel) -> np.ndarray:
    return (sums // kernel.horizontal_divisor) // kernel.vertical_divisor


def _full_2d(src: ImageBuffer, dst: ImageBuffer, kernel: SeparableKernel) -> None:
    r = kernel.radius
    weights = kernel.outer()[:, :, np.newaxis]
    sums = ndimage.correlate(src.data.astype(np.int32), weights, mode='constant')
    dst.data[r:-r, r:-r] = sums[r:-r, r:-r] // kernel.divisor


def _separable(src: ImageBuffer, dst: ImageBuffer, kernel: SeparableKernel) -> None:
    r = kernel.radius
    dst.data[r:-r, r:-r] = _normalize_separable(separable_sums(src.data, kernel), kernel)


def _unrolled_indexed(src: ImageBuffer, dst: ImageBuffer, kernel: SeparableKernel) -> None:
    if kernel.size != 5:
        raise ValueError(f"Unrolled strategy needs a 5-tap kernel, got {kernel.size}")
    h0, h1, h2, h3, h4 = kernel.horizontal
    v0, v1, v2, v3, v4 = kernel.vertical
    divisor = kernel.divisor
    at = src.at

    for y in range(2, src.height - 2):
        for x in range(2, src.width - 2):
            for c in range(src.channels):
                total = (
                    v0 * (h0 * at(y - 2, x - 2, c) + h1 * at(y - 2, x - 1, c) + h2 * at(y - 2, x, c)
                          + h3 * at(y - 2, x + 1, c) + h4 * at(y - 2, x + 2, c))
                    + v1 * (h0 * at(y - 1, x - 2, c) + h1 * at(y - 1, x - 1, c) + h2 * at(y - 1, x, c)
                            + h3 * at(y - 1, x + 1, c) + h4 * at(y - 1, x + 2, c))
                    + v2 * (h0 * at(y, x - 2, c) + h1 * at(y, x - 1, c) + h2 * at(y, x, c)
                            + h3 * at(y, x + 1, c) + h4 * at(y, x + 2, c))
                    + v3 * (h0 * at(y + 1, x - 2, c) + h1 * at(y + 1, x - 1, c) + h2 * at(y + 1, x, c)
                            + h3 * at(y + 1, x + 1, c) + h4 * at(y + 1, x + 2, c))
                    + v4 * (h0 * at(y + 2, x - 2, c) + h1 * at(y + 2, x - 1, c) + h2 * at(y + 2, x, c)
                            + h3 * at(y + 2, x + 1, c) + h4 * at(y + 2, x + 2, c))
                )
                dst.put(y, x, c, total // divisor)


def _row_cached(src: ImageBuffer, dst: ImageBuffer, kernel: SeparableKernel) -> None:
    r = kernel.radius
    channels = src.channels
    span = (src.width - 2 * r) * channels
    offsets = [k * channels for k in range(kernel.size)]
    # Horizontal partial sums of the last kernel.size scanlines
    window = deque(maxlen=kernel.size)

    for y in range(src.height):
        row = src.row(y).astype(np.int32)
        partial_sum = np.zeros(span, dtype=np.int32)
        for offset, weight in zip(offsets, kernel.horizontal):
            partial_sum += weight * row[offset:offset + span]
        window.append(partial_sum)

        if len(window) < kernel.size:
            continue
        acc = np.zeros(span, dtype=np.int32)
        for weight, cached in zip(kernel.vertical, window):
            acc += weight * cached
        out = dst.row(y - r)
        out[r * channels:r * channels + span] = _normalize_separable(acc, kernel)


def _production(src: ImageBuffer, dst: ImageBuffer, kernel: SeparableKernel) -> None:
    r = kernel.radius
    kx = np.array(kernel.horizontal, dtype=np.float32)
    ky = np.array(kernel.vertical, dtype=np.float32)
    # float32 holds the integer sums exactly (max 255 * 100 < 2**24)
    sums = cv2.sepFilter2D(src.data, cv2.CV_32F, kx, ky)
    sums = sums.reshape(src.shape)
    interior = sums[r:-r, r:-r].astype(np.int32)
    dst.data[r:-r, r:-r] = _normalize_separable(interior, kernel)


_STRATEGIES: Dict[BlurStrategy, Callable[[ImageBuffer, ImageBuffer, SeparableKernel], None]] = {
    BlurStrategy.FULL_2D: _full_2d,
    BlurStrategy.SEPARABLE: _separable,
    BlurStrategy.UNROLLED_INDEXED: _unrolled_indexed,
    BlurStrategy.ROW_CACHED: _row_cached,
    BlurStrategy.PRODUCTION: _production,
}


def convolve_pass_through(
    src: ImageBuffer,
    kernel: SeparableKernel,
    strategy: BlurStrategy = BlurStrategy.SEPARABLE,
    name: str = "convolve"
) -> ImageBuffer:
    """Normalized convolution of the interior; border pixels are copied from src."""
    src.require_not_empty(name)
    dst = src.clone()
    if not kernel.fits(src.height, src.width):
        return dst
    _STRATEGIES[strategy](src, dst, kernel)
    return dst


def blur5x5(src: ImageBuffer, strategy: BlurStrategy = BlurStrategy.PRODUCTION) -> ImageBuffer:
    """5x5 integer Gaussian blur, 2px pass-through border."""
    return convolve_pass_through(src, GAUSS_5X5, strategy, name=strategy.variant_name)


def gauss3x3(src: ImageBuffer) -> ImageBuffer:
    """3x3 integer Gaussian blur (divisor 16), 1px pass-through border."""
    return convolve_pass_through(src, GAUSS_3X3, BlurStrategy.SEPARABLE, name="gauss3x3")


blur5x5_1 = partial(blur5x5, strategy=BlurStrategy.FULL_2D)
blur5x5_2 = partial(blur5x5, strategy=BlurStrategy.SEPARABLE)
blur5x5_3 = partial(blur5x5, strategy=BlurStrategy.UNROLLED_INDEXED)
blur5x5_4 = partial(blur5x5, strategy=BlurStrategy.ROW_CACHED)
blur5x5_5 = partial(blur5x5, strategy=BlurStrategy.PRODUCTION)

BLUR_VARIANTS = {
    strategy.variant_name: partial(blur5x5, strategy=strategy) for strategy in BlurStrategy
}
