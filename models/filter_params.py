"""Filter selection and parameters."""

from dataclasses import dataclass, replace
from enum import Enum

from utils.constants import BRIGHTNESS_STEP, DEFAULT_QUANTIZE_LEVELS


class FilterMode(Enum):
    """Active filter for a frame."""

    NONE = 'none'
    GREYSCALE = 'greyscale'
    ALT_GREYSCALE = 'alt_greyscale'
    SEPIA = 'sepia'
    BLUR = 'blur'
    GAUSS3X3 = 'gauss3x3'
    SOBEL_X = 'sobel_x'
    SOBEL_Y = 'sobel_y'
    MAGNITUDE = 'magnitude'
    BLUR_QUANTIZE = 'blur_quantize'
    EMBOSS = 'emboss'
    NEGATIVE = 'negative'


class BlurStrategy(Enum):
    """Memory-access strategy for the 5x5 Gaussian blur. All produce identical pixels."""

    FULL_2D = 1
    SEPARABLE = 2
    UNROLLED_INDEXED = 3
    ROW_CACHED = 4
    PRODUCTION = 5

    @property
    def variant_name(self) -> str:
        return f"blur5x5_{self.value}"

    @classmethod
    def from_variant_name(cls, name: str) -> 'BlurStrategy':
        for strategy in cls:
            if strategy.variant_name == name or strategy.name.lower() == name.lower():
                return strategy
        raise ValueError(f"Unknown blur variant: {name}")


@dataclass(frozen=True)
class FilterParams:
    """Per-frame filter selection."""

    mode: FilterMode = FilterMode.NONE
    brightness: float = 1.0
    levels: int = DEFAULT_QUANTIZE_LEVELS
    blur_strategy: BlurStrategy = BlurStrategy.PRODUCTION

    def __post_init__(self):
        if self.levels < 1:
            raise ValueError(f"Quantization levels must be >= 1, got {self.levels}")
        if self.brightness < 0:
            raise ValueError(f"Brightness must be non-negative, got {self.brightness}")

    def with_brightness_step(self, steps: int) -> 'FilterParams':
        """Copy with brightness moved by ``steps`` increments, floored at zero."""
        brightness = round(max(0.0, self.brightness + steps * BRIGHTNESS_STEP), 2)
        return replace(self, brightness=brightness)
