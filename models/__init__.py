"""Data models for image buffers, filter parameters and benchmark results."""

from .image_buffer import ImageBuffer, EmptyImageError, PIXEL_DTYPE, GRADIENT_DTYPE
from .filter_params import FilterMode, BlurStrategy, FilterParams
from .benchmark_params import BenchmarkParams
from .benchmark_result import BenchmarkResult

__all__ = [
    'ImageBuffer',
    'EmptyImageError',
    'PIXEL_DTYPE',
    'GRADIENT_DTYPE',
    'FilterMode',
    'BlurStrategy',
    'FilterParams',
    'BenchmarkParams',
    'BenchmarkResult',
]
