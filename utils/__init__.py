"""Shared utilities."""

from .constants import RED, GREEN, BLUE, MAX_VALUE, DEFAULT_QUANTIZE_LEVELS, DEFAULT_REPEAT
from .logging import get_logger, set_level
from .metrics import Timer, compare_interior
from .test_images import (
    generate_uniform,
    generate_noise,
    generate_checkerboard,
    generate_vertical_edge,
    generate_gradient,
    generate_photo,
    generate_demo_image,
)
from .image_io import load_image, save_image, load_buffer, save_buffer

__all__ = [
    'RED',
    'GREEN',
    'BLUE',
    'MAX_VALUE',
    'DEFAULT_QUANTIZE_LEVELS',
    'DEFAULT_REPEAT',
    'get_logger',
    'set_level',
    'Timer',
    'compare_interior',
    'generate_uniform',
    'generate_noise',
    'generate_checkerboard',
    'generate_vertical_edge',
    'generate_gradient',
    'generate_photo',
    'generate_demo_image',
    'load_image',
    'save_image',
    'load_buffer',
    'save_buffer',
]
