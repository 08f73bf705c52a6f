"""Metrics: wall-clock timing and output agreement."""

import time
import numpy as np
from skimage.metrics import peak_signal_noise_ratio
from typing import Dict


class Timer:
    """
    Accumulating wall-clock timer on the monotonic perf_counter clock.

    Only calls that return count towards ``total_seconds``; time spent in a
    call that raised goes to ``aborted_seconds``.
    """

    def __init__(self):
        self.total_seconds = 0.0
        self.aborted_seconds = 0.0
        self.calls = 0
        self._start = None

    def __enter__(self):
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        elapsed = time.perf_counter() - self._start
        self._start = None
        if exc_type is None:
            self.total_seconds += elapsed
            self.calls += 1
        else:
            self.aborted_seconds += elapsed
        return False

    def measure(self, func, *args, **kwargs):
        with self:
            return func(*args, **kwargs)

    @property
    def per_call_seconds(self) -> float:
        return self.total_seconds / self.calls if self.calls else 0.0


def compare_interior(reference: np.ndarray, candidate: np.ndarray, border: int = 0) -> Dict[str, float]:
    """Max absolute difference and PSNR over the region ``border`` pixels in from each edge."""
    if reference.shape != candidate.shape:
        raise ValueError(f"Shapes differ: {reference.shape} vs {candidate.shape}")
    h, w = reference.shape[:2]
    ref = reference[border:h - border, border:w - border]
    cand = candidate[border:h - border, border:w - border]
    if ref.size == 0:
        return {'max_abs_diff': 0, 'psnr': float('inf')}

    max_abs_diff = int(np.max(np.abs(ref.astype(np.int32) - cand.astype(np.int32))))
    if max_abs_diff == 0:
        psnr = float('inf')
    else:
        psnr = float(peak_signal_noise_ratio(ref, cand, data_range=255))
    return {'max_abs_diff': max_abs_diff, 'psnr': psnr}
