"""Filter engines - pure computation over ImageBuffer, no display dependencies."""

from .kernels import SeparableKernel, GAUSS_5X5, GAUSS_3X3, SOBEL_X, SOBEL_Y
from .convolution import (
    blur5x5,
    blur5x5_1,
    blur5x5_2,
    blur5x5_3,
    blur5x5_4,
    blur5x5_5,
    gauss3x3,
    BLUR_VARIANTS,
)
from .gradients import sobel_x3x3, sobel_y3x3, magnitude, gradient_magnitude, emboss, abs_gradient
from .pixel_ops import greyscale, luma_greyscale, sepia_tone, adjust_brightness, negative
from .quantize import blur_quantize
from .pipeline import apply_filter, process_frame
from .benchmark import run_benchmark, format_report

__all__ = [
    'SeparableKernel',
    'GAUSS_5X5',
    'GAUSS_3X3',
    'SOBEL_X',
    'SOBEL_Y',
    'blur5x5',
    'blur5x5_1',
    'blur5x5_2',
    'blur5x5_3',
    'blur5x5_4',
    'blur5x5_5',
    'gauss3x3',
    'BLUR_VARIANTS',
    'sobel_x3x3',
    'sobel_y3x3',
    'magnitude',
    'gradient_magnitude',
    'emboss',
    'abs_gradient',
    'greyscale',
    'luma_greyscale',
    'sepia_tone',
    'adjust_brightness',
    'negative',
    'blur_quantize',
    'apply_filter',
    'process_frame',
    'run_benchmark',
    'format_report',
]
