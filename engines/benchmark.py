"""Timing harness for the five 5x5 blur variants."""

import os
from typing import Callable, List, Optional

from models.benchmark_params import BenchmarkParams
from models.benchmark_result import BenchmarkResult
from models.image_buffer import ImageBuffer
from engines.convolution import blur5x5
from engines.kernels import GAUSS_5X5
from utils.image_io import save_buffer
from utils.logging import get_logger
from utils.metrics import Timer, compare_interior

logger = get_logger(__name__)

Writer = Callable[[ImageBuffer, str], str]


def output_filename(index: int, image_ext: str) -> str:
    return f"blur_{index}{image_ext}"


def run_benchmark(
    source: ImageBuffer,
    params: BenchmarkParams,
    writer: Optional[Writer] = save_buffer
) -> List[BenchmarkResult]:
    """
    Time each blur variant ``params.repeat`` times, sequentially.

    The last output of each variant is written once, outside the timed loop,
    when ``writer`` and ``params.output_dir`` are set. A variant that raises
    stops timing at that iteration; the remaining variants still run.
    """
    source.require_not_empty("run_benchmark")
    logger.info(
        "Benchmarking %d variant(s) on %dx%dx%d image, %d run(s) each",
        len(params.variants), source.width, source.height, source.channels, params.repeat
    )

    results = []
    reference = None

    for strategy in params.variants:
        name = strategy.variant_name
        timer = Timer()
        output = None
        error = None

        for i in range(params.repeat):
            try:
                output = timer.measure(blur5x5, source, strategy)
            except Exception as e:
                error = f"{type(e).__name__}: {e}"
                logger.error("%s failed on iteration %d: %s", name, i + 1, error)
                break
            logger.debug("Finished %s iteration: %d", name, i + 1)

        result = BenchmarkResult(
            variant=name,
            index=strategy.value,
            completed_runs=timer.calls,
            requested_runs=params.repeat,
            total_seconds=timer.total_seconds,
            per_call_seconds=timer.per_call_seconds,
            error=error,
        )

        if error is None and output is not None:
            if writer is not None and params.output_dir is not None:
                path = os.path.join(params.output_dir, output_filename(strategy.value, params.image_ext))
                result.output_path = writer(output, path)

            if reference is None:
                reference = output
            agreement = compare_interior(reference.data, output.data, border=GAUSS_5X5.radius)
            result.max_abs_diff = agreement['max_abs_diff']
            result.psnr = agreement['psnr']

        logger.info("%s: %.4f s per image, %.4f s total", name, result.per_call_seconds, result.total_seconds)
        results.append(result)

    return results


def format_report(results: List[BenchmarkResult]) -> str:
    """Human-readable timing report, one block per variant."""
    lines = []
    for r in results:
        if not r.ok:
            lines.append(f"{r.variant} ({r.index}): FAILED after {r.completed_runs} run(s): {r.error}")
            continue
        lines.append(f"Time per image ({r.index}): {r.per_call_seconds:.4f} seconds")
        lines.append(f"Total time ({r.index}): {r.total_seconds:.4f} seconds")
        if r.output_path:
            lines.append(f"Saved: {r.output_path}")

    checked = [r for r in results if r.ok and r.max_abs_diff is not None]
    if checked:
        worst = max(r.max_abs_diff for r in checked)
        if worst == 0:
            lines.append("Verification: all variants produce identical interior pixels")
        else:
            lines.append(f"Verification: variants differ, max interior difference {worst}")

    timed = [r for r in results if r.ok]
    if timed:
        best = min(timed, key=lambda r: r.per_call_seconds)
        lines.append(f"Fastest: {best.variant} ({best.per_call_seconds:.4f} s per image)")
    return "\n".join(lines)
