"""Benchmark timing chart."""

from typing import List

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from models.benchmark_result import BenchmarkResult


def plot_benchmark(results: List[BenchmarkResult], path: str, title: str = "5x5 Blur Variants") -> str:
    """Bar chart of per-image time (ms) for each successful variant, saved to ``path``."""
    timed = [r for r in results if r.ok]
    if not timed:
        raise ValueError("No successful benchmark results to plot")

    names = [r.variant for r in timed]
    times_ms = np.array([r.per_call_seconds * 1000.0 for r in timed])

    fig, ax = plt.subplots(figsize=(8, 5))
    x = np.arange(len(names))
    bars = ax.bar(x, times_ms, color='#2E86AB', alpha=0.8)

    for bar in bars:
        height = bar.get_height()
        ax.text(bar.get_x() + bar.get_width() / 2., height, f'{height:.2f}',
                ha='center', va='bottom', fontsize=8)

    ax.set_xticks(x)
    ax.set_xticklabels(names)
    ax.set_ylabel('Time per image (ms)', fontweight='bold')
    ax.set_title(title, fontweight='bold')
    ax.grid(True, alpha=0.3, axis='y')
    if times_ms.max() > 0 and times_ms.max() / max(times_ms.min(), 1e-9) > 100:
        ax.set_yscale('log')

    fig.tight_layout()
    fig.savefig(path, dpi=120)
    plt.close(fig)
    return path
