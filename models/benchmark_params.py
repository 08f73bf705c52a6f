"""Benchmark parameters."""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from models.filter_params import BlurStrategy
from utils.constants import DEFAULT_REPEAT


@dataclass
class BenchmarkParams:
    """Blur benchmark configuration."""

    repeat: int = DEFAULT_REPEAT
    variants: Tuple[BlurStrategy, ...] = field(default_factory=lambda: tuple(BlurStrategy))
    output_dir: Optional[str] = '.'
    image_ext: str = '.jpg'

    def __post_init__(self):
        if self.repeat < 1:
            raise ValueError(f"Repeat count must be >= 1, got {self.repeat}")
        if not self.variants:
            raise ValueError("At least one blur variant is required")
        self.variants = tuple(
            v if isinstance(v, BlurStrategy) else BlurStrategy.from_variant_name(v)
            for v in self.variants
        )
        if not self.image_ext.startswith('.'):
            self.image_ext = '.' + self.image_ext
