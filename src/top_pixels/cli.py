"""
Top-K pixel selection command-line interface.

Subcommands:
- select: generate a random image and print its brightest pixels
- sweep: check the selection against a full sort for every input size
- complexity: check empirically that selection runs in O(N log k)

Usage examples:
    python -m top_pixels select --rows 256 --columns 256 --count 50
    python -m top_pixels sweep --max-size 4096 --count 50
    python -m top_pixels complexity --count 50 --max-size 200000
"""

import argparse

from .algorithm import HIGH_PIXELS_NUM
from .data_structures import MAX_HEAP_CAPACITY, HeapError
from .image import IMAGE_COLUMNS, IMAGE_ROWS, generate_image, top_pixels
from .tester import SWEEP_SIDE, check_selection_complexity, run_sweep


def cmd_select(args):
	"""Print [row, column, value] for the brightest pixels, highest first."""
	image = generate_image(args.rows, args.columns, seed=args.seed, max_value=args.max_value)
	pixels = top_pixels(image, args.count)
	print(" ".join(f"[{p['row']}, {p['column']}, {p['value']}]" for p in pixels))
	return 0


def cmd_sweep(args):
	"""Run the reference sweep and report failing sizes."""
	result = run_sweep(args.max_size, args.count, seed=args.seed, step=args.step, max_value=args.max_value)
	if result.passed:
		print(f"All {result.checked} sizes match the reference (k={result.k}).")
		return 0
	print(f"{len(result.failures)} of {result.checked} sizes differ from the reference (k={result.k}):")
	print(" ".join(str(size) for size in result.failures))
	return 1


def cmd_complexity(args):
	"""Fit selection timings against N log k."""
	result = check_selection_complexity(
		k=args.count,
		min_size=args.min_size,
		max_size=args.max_size,
		num_samples=args.samples,
		seed=args.seed,
	)
	print(result.message)
	return 0 if result.is_match else 1


def build_parser():
	"""Configure the top-level parser and subcommands."""
	p = argparse.ArgumentParser(prog="top-pixels", description="Select the brightest pixels of an image")
	sub = p.add_subparsers(dest="cmd", required=True)

	s = sub.add_parser("select", help="Print the brightest pixels of a random image")
	s.add_argument("--rows", type=int, default=IMAGE_ROWS)
	s.add_argument("--columns", type=int, default=IMAGE_COLUMNS)
	s.add_argument("--count", type=int, default=HIGH_PIXELS_NUM, help=f"pixels to select (max {MAX_HEAP_CAPACITY})")
	s.add_argument("--seed", type=int, default=0)
	s.add_argument("--max-value", type=int, default=0xFF)
	s.set_defaults(func=cmd_select)

	s = sub.add_parser("sweep", help="Compare the selection with a full sort for sizes 1..max-size")
	s.add_argument("--max-size", type=int, default=SWEEP_SIDE * SWEEP_SIDE)
	s.add_argument("--count", type=int, default=HIGH_PIXELS_NUM)
	s.add_argument("--seed", type=int, default=0)
	s.add_argument("--step", type=int, default=1)
	s.add_argument("--max-value", type=int, default=0xFF)
	s.set_defaults(func=cmd_sweep)

	s = sub.add_parser("complexity", help="Check that selection time grows as N log k")
	s.add_argument("--count", type=int, default=HIGH_PIXELS_NUM)
	s.add_argument("--min-size", type=int, default=1_000)
	s.add_argument("--max-size", type=int, default=100_000)
	s.add_argument("--samples", type=int, default=8)
	s.add_argument("--seed", type=int, default=0)
	s.set_defaults(func=cmd_complexity)

	return p


def main(argv=None):
	"""CLI entry point when invoked via `python -m top_pixels` or `top-pixels`."""
	parser = build_parser()
	args = parser.parse_args(argv)
	try:
		return args.func(args)
	except (HeapError, ValueError) as e:
		parser.error(str(e))


if __name__ == "__main__":
	raise SystemExit(main())
