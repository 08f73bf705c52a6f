"""Tests for the blur benchmark harness."""

import math
import os
import time

import numpy as np
import pytest
import engines.benchmark as benchmark
from models.benchmark_params import BenchmarkParams
from models.filter_params import BlurStrategy
from models.image_buffer import ImageBuffer
from engines.benchmark import run_benchmark, format_report
from utils.metrics import Timer, compare_interior
from utils.plotting import plot_benchmark
from utils.test_images import generate_noise


def _collecting_writer(store):
    def write(buffer, path):
        store[path] = buffer
        return path
    return write


def test_all_variants_timed_and_saved():
    source = ImageBuffer(generate_noise(16, seed=4))
    saved = {}
    params = BenchmarkParams(repeat=2, output_dir='out')
    results = run_benchmark(source, params, writer=_collecting_writer(saved))

    assert [r.variant for r in results] == [f"blur5x5_{i}" for i in range(1, 6)]
    assert sorted(saved) == [os.path.join('out', f"blur_{i}.jpg") for i in range(1, 6)]
    for r in results:
        assert r.ok
        assert r.completed_runs == 2
        assert r.total_seconds >= 0
        assert r.per_call_seconds == pytest.approx(r.total_seconds / 2)
        assert r.max_abs_diff == 0
        assert math.isinf(r.psnr)


def test_no_output_dir_skips_saving():
    saved = {}
    params = BenchmarkParams(repeat=1, variants=('blur5x5_2',), output_dir=None)
    results = run_benchmark(ImageBuffer(generate_noise(8)), params, writer=_collecting_writer(saved))
    assert not saved
    assert results[0].output_path is None


def test_failing_variant_aborts_only_itself(monkeypatch):
    real_blur = benchmark.blur5x5
    calls = {'n': 0}

    def flaky(src, strategy):
        if strategy is BlurStrategy.SEPARABLE:
            calls['n'] += 1
            if calls['n'] == 2:
                raise RuntimeError("boom")
        return real_blur(src, strategy)

    monkeypatch.setattr(benchmark, 'blur5x5', flaky)
    params = BenchmarkParams(
        repeat=3,
        variants=(BlurStrategy.FULL_2D, BlurStrategy.SEPARABLE, BlurStrategy.PRODUCTION),
        output_dir=None,
    )
    results = run_benchmark(ImageBuffer(generate_noise(10)), params, writer=None)

    failed = results[1]
    assert not failed.ok
    assert "boom" in failed.error
    assert failed.completed_runs == 1
    assert failed.per_call_seconds == pytest.approx(failed.total_seconds)
    assert results[0].ok and results[2].ok
    assert results[2].completed_runs == 3
    assert "FAILED" in format_report(results)


def test_report_lines():
    params = BenchmarkParams(repeat=1, variants=('blur5x5_1', 'blur5x5_5'), output_dir=None)
    report = format_report(run_benchmark(ImageBuffer(generate_noise(8)), params))
    assert "Time per image (1):" in report
    assert "Total time (5):" in report
    assert "identical" in report


def test_writes_real_files(tmp_path):
    params = BenchmarkParams(repeat=1, variants=('blur5x5_5',), output_dir=str(tmp_path), image_ext='png')
    results = run_benchmark(ImageBuffer(generate_noise(12)), params)
    assert os.path.exists(tmp_path / "blur_5.png")
    assert results[0].output_path == str(tmp_path / "blur_5.png")


def test_params_validation():
    with pytest.raises(ValueError):
        BenchmarkParams(repeat=0)
    with pytest.raises(ValueError):
        BenchmarkParams(variants=())
    with pytest.raises(ValueError):
        BenchmarkParams(variants=('blur7x7',))
    assert BenchmarkParams().variants == tuple(BlurStrategy)


def test_timer_counts_calls():
    timer = Timer()
    assert timer.measure(sum, [1, 2, 3]) == 6
    timer.measure(len, "abc")
    assert timer.calls == 2
    assert timer.per_call_seconds == pytest.approx(timer.total_seconds / 2)


def test_timer_excludes_raising_calls():
    """A call that raises is timed separately and does not skew the per-call average."""
    def slow_failure():
        time.sleep(0.02)
        raise RuntimeError("fail")

    timer = Timer()
    timer.measure(len, "abc")
    with pytest.raises(RuntimeError):
        timer.measure(slow_failure)
    assert timer.calls == 1
    assert timer.aborted_seconds >= 0.02
    assert timer.total_seconds < timer.aborted_seconds
    assert timer.per_call_seconds == pytest.approx(timer.total_seconds)


def test_compare_interior_ignores_border():
    a = np.zeros((6, 6, 3), dtype=np.uint8)
    b = a.copy()
    b[0, 0] = 200
    assert compare_interior(a, b, border=2)['max_abs_diff'] == 0
    b[3, 3] = 10
    stats = compare_interior(a, b, border=2)
    assert stats['max_abs_diff'] == 10
    assert np.isfinite(stats['psnr'])


def test_plot_saved(tmp_path):
    params = BenchmarkParams(repeat=1, variants=('blur5x5_2', 'blur5x5_5'), output_dir=None)
    results = run_benchmark(ImageBuffer(generate_noise(8)), params)
    path = plot_benchmark(results, str(tmp_path / "chart.png"))
    assert os.path.exists(path)
