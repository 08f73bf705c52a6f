"""
FilterLab
Integer image filters + 5x5 blur strategy benchmark
"""

import argparse
import logging
import sys


def _load_source(args):
    from models.image_buffer import ImageBuffer
    from utils.image_io import load_buffer
    from utils.test_images import generate_demo_image

    if args.synthetic or not args.source:
        print(f"Generating test image ({args.demo}, {args.size}px)...")
        return ImageBuffer(generate_demo_image(args.demo, args.size))
    print(f"Loading: {args.source}")
    return load_buffer(args.source)


def _add_source_arguments(parser, default_size: int) -> None:
    parser.add_argument('source', nargs='?', default=None, help='image path')
    parser.add_argument('--synthetic', action='store_true', help='use a generated image instead of a file')
    parser.add_argument('--size', type=int, default=default_size, help='synthetic image size')
    parser.add_argument('--demo', default='photo', help='synthetic image kind')


def _configure_logging(verbose: bool) -> None:
    from utils.logging import set_level
    set_level(logging.DEBUG if verbose else logging.INFO)


def run_cli(argv):
    """Apply one filter to an image and save the result."""
    from models.filter_params import FilterMode, FilterParams, BlurStrategy
    from engines.pipeline import process_frame
    from utils.image_io import save_buffer
    from utils.metrics import Timer

    parser = argparse.ArgumentParser(prog='main.py --cli', description='Apply a filter to an image.')
    _add_source_arguments(parser, default_size=256)
    parser.add_argument('--filter', default='blur', choices=[m.value for m in FilterMode])
    parser.add_argument('--levels', type=int, default=10, help='blur_quantize level count')
    parser.add_argument('--brightness', type=float, default=1.0)
    parser.add_argument('--strategy', default='production', choices=[s.name.lower() for s in BlurStrategy])
    parser.add_argument('--out', default='filtered.png')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)
    if not args.source and not args.synthetic:
        parser.error("an image path or --synthetic is required")
    _configure_logging(args.verbose)

    frame = _load_source(args)
    params = FilterParams(
        mode=FilterMode(args.filter),
        brightness=args.brightness,
        levels=args.levels,
        blur_strategy=BlurStrategy.from_variant_name(args.strategy),
    )

    print(f"Image: {frame.width}x{frame.height}x{frame.channels}")
    print(f"Filter: {params.mode.value}")

    timer = Timer()
    result = timer.measure(process_frame, frame, params)

    print(f"Time: {timer.total_seconds * 1000.0:.2f} ms")
    save_buffer(result, args.out)
    print(f"\nSaved: {args.out}")


def run_bench(argv):
    """Time the five blur variants."""
    from models.benchmark_params import BenchmarkParams
    from models.filter_params import BlurStrategy
    from engines.benchmark import run_benchmark, format_report

    parser = argparse.ArgumentParser(prog='main.py --bench', description='Benchmark the 5x5 blur variants.')
    _add_source_arguments(parser, default_size=128)
    parser.add_argument('--repeat', type=int, default=10)
    parser.add_argument('--variants', nargs='+', default=[s.variant_name for s in BlurStrategy],
                        help='e.g. blur5x5_1 blur5x5_5, or strategy names')
    parser.add_argument('--output-dir', default='.')
    parser.add_argument('--no-save', action='store_true', help='skip writing one output per variant')
    parser.add_argument('--plot', default=None, help='save a timing bar chart to this path')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    source = _load_source(args)
    params = BenchmarkParams(
        repeat=args.repeat,
        variants=tuple(args.variants),
        output_dir=None if args.no_save else args.output_dir,
    )

    print(f"Image: {source.width}x{source.height}x{source.channels}")
    print(f"Runs per variant: {params.repeat}")

    results = run_benchmark(source, params)

    print("\n=== Results ===")
    print(format_report(results))

    if args.plot:
        from utils.plotting import plot_benchmark
        plot_benchmark(results, args.plot)
        print(f"Saved chart: {args.plot}")

    print("Terminating")
    return 0 if all(r.ok for r in results) else 1


def main():
    if len(sys.argv) > 1 and sys.argv[1] == '--cli':
        run_cli(sys.argv[2:])
    elif len(sys.argv) > 1 and sys.argv[1] == '--bench':
        sys.exit(run_bench(sys.argv[2:]))
    else:
        print("Usage: python main.py --cli <image_path> [--filter MODE] [options]")
        print("       python main.py --cli --synthetic [--filter MODE] [options]")
        print("       python main.py --bench [<image_path>] [--repeat N] [options]")
        sys.exit(0)


if __name__ == '__main__':
    main()
