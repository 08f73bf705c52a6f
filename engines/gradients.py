"""Sobel gradients and the filters built on a gradient pair."""

import cv2
import numpy as np

from models.image_buffer import ImageBuffer, GRADIENT_DTYPE, PIXEL_DTYPE
from engines.convolution import separable_sums
from engines.kernels import SeparableKernel, SOBEL_X, SOBEL_Y
from utils.constants import EMBOSS_DIRECTION, EMBOSS_OFFSET, MAX_VALUE


def _sobel(src: ImageBuffer, kernel: SeparableKernel, name: str) -> ImageBuffer:
    src.require_not_empty(name)
    dst = ImageBuffer.allocate(src.width, src.height, src.channels, GRADIENT_DTYPE)
    if kernel.fits(src.height, src.width):
        r = kernel.radius
        dst.data[r:-r, r:-r] = separable_sums(src.data, kernel)
    return dst


def sobel_x3x3(src: ImageBuffer) -> ImageBuffer:
    """Horizontal gradient, positive to the right. int16 output, zero 1px border."""
    return _sobel(src, SOBEL_X, "sobel_x3x3")


def sobel_y3x3(src: ImageBuffer) -> ImageBuffer:
    """Vertical gradient, positive upwards. int16 output, zero 1px border."""
    return _sobel(src, SOBEL_Y, "sobel_y3x3")


def _check_pair(sx: ImageBuffer, sy: ImageBuffer, name: str) -> None:
    sx.require_not_empty(name)
    sy.require_not_empty(name)
    if not sx.same_geometry(sy):
        raise ValueError(f"{name}: gradient shapes differ, {sx.shape} vs {sy.shape}")
    if sx.dtype != GRADIENT_DTYPE or sy.dtype != GRADIENT_DTYPE:
        raise ValueError(f"{name}: gradients must be int16, got {sx.dtype} and {sy.dtype}")


def magnitude(sx: ImageBuffer, sy: ImageBuffer) -> ImageBuffer:
    """
    Per-channel Euclidean norm of a gradient pair.

    The norm of two unnormalized Sobel responses reaches ~1442, so values are
    floored and saturated at 255 rather than wrapped.
    """
    _check_pair(sx, sy, "magnitude")
    gx = sx.data.astype(np.float64)
    gy = sy.data.astype(np.float64)
    norm = np.floor(np.sqrt(gx * gx + gy * gy))
    return ImageBuffer(np.clip(norm, 0, MAX_VALUE).astype(PIXEL_DTYPE))


def gradient_magnitude(src: ImageBuffer) -> ImageBuffer:
    """Sobel X and Y followed by magnitude."""
    src.require_not_empty("gradient_magnitude")
    return magnitude(sobel_x3x3(src), sobel_y3x3(src))


def emboss(sx: ImageBuffer, sy: ImageBuffer) -> ImageBuffer:
    """Directional derivative along 45 degrees, offset to mid-grey."""
    _check_pair(sx, sy, "emboss")
    wx, wy = EMBOSS_DIRECTION
    shade = wx * sx.data.astype(np.float64) + wy * sy.data.astype(np.float64) + EMBOSS_OFFSET
    return ImageBuffer(np.floor(np.clip(shade, 0, MAX_VALUE)).astype(PIXEL_DTYPE))


def abs_gradient(grad: ImageBuffer) -> ImageBuffer:
    """Absolute value of a single gradient, saturated to uint8 for display."""
    grad.require_not_empty("abs_gradient")
    shown = cv2.convertScaleAbs(grad.data, alpha=1, beta=0)
    return ImageBuffer(shown.reshape(grad.shape))
