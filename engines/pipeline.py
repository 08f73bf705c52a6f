"""Per-frame filter pipeline: apply the selected mode, then brightness."""

from models.filter_params import FilterMode, FilterParams
from models.image_buffer import EmptyImageError, ImageBuffer
from engines.convolution import blur5x5, gauss3x3
from engines.gradients import sobel_x3x3, sobel_y3x3, magnitude, emboss, abs_gradient
from engines.pixel_ops import greyscale, luma_greyscale, sepia_tone, adjust_brightness, negative
from engines.quantize import blur_quantize
from utils.logging import get_logger

logger = get_logger(__name__)


def apply_filter(src: ImageBuffer, params: FilterParams) -> ImageBuffer:
    """Run the filter selected by ``params.mode``. Raises on empty input."""
    mode = params.mode
    src.require_not_empty(mode.value)

    if mode is FilterMode.NONE:
        return src.clone()
    if mode is FilterMode.GREYSCALE:
        return luma_greyscale(src)
    if mode is FilterMode.ALT_GREYSCALE:
        return greyscale(src)
    if mode is FilterMode.SEPIA:
        return sepia_tone(src)
    if mode is FilterMode.BLUR:
        return blur5x5(src, params.blur_strategy)
    if mode is FilterMode.GAUSS3X3:
        return gauss3x3(src)
    if mode is FilterMode.SOBEL_X:
        return abs_gradient(sobel_x3x3(src))
    if mode is FilterMode.SOBEL_Y:
        return abs_gradient(sobel_y3x3(src))
    if mode is FilterMode.MAGNITUDE:
        return magnitude(sobel_x3x3(src), sobel_y3x3(src))
    if mode is FilterMode.EMBOSS:
        return emboss(sobel_x3x3(src), sobel_y3x3(src))
    if mode is FilterMode.BLUR_QUANTIZE:
        return blur_quantize(src, params.levels, params.blur_strategy)
    if mode is FilterMode.NEGATIVE:
        return negative(src)
    raise ValueError(f"Unsupported filter mode: {mode}")


def process_frame(frame: ImageBuffer, params: FilterParams) -> ImageBuffer:
    """
    Filter one frame for display.

    Brightness is applied after the selected filter on every frame. If a step
    fails on empty input the frame from before that step is kept.
    """
    try:
        filtered = apply_filter(frame, params)
    except EmptyImageError as e:
        logger.warning("Skipping %s: %s", params.mode.value, e)
        return frame

    if params.brightness == 1.0:
        return filtered
    try:
        return adjust_brightness(filtered, params.brightness)
    except EmptyImageError as e:
        logger.warning("Skipping brightness: %s", e)
        return filtered
