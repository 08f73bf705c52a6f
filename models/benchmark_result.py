"""Per-variant benchmark result."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class BenchmarkResult:
    """Timing and verification for one blur variant."""

    variant: str
    index: int
    completed_runs: int
    requested_runs: int

    # Runtime
    total_seconds: float
    per_call_seconds: float

    output_path: Optional[str] = None

    # Agreement with the reference variant (interior pixels)
    max_abs_diff: Optional[int] = None
    psnr: Optional[float] = None

    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
