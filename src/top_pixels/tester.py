import time
import warnings
from dataclasses import dataclass, field

import numpy as np
from scipy.optimize import curve_fit

from .algorithm import HIGH_PIXELS_NUM, select_top_k
from .reference import matches_reference

SWEEP_SIDE = 64


@dataclass
class SweepResult:
	"""Results from sweeping the selection over increasing input sizes.

	Attributes:
		k: Number of samples selected at every size.
		checked: Number of input sizes checked.
		failures: Input sizes whose selection disagreed with the reference.
	"""

	k: int
	checked: int = 0
	failures: list[int] = field(default_factory=list)

	@property
	def passed(self) -> bool:
		return not self.failures


@dataclass
class ComplexityCheckResult:
	"""Results from the empirical running-time check.

	Attributes:
		is_match: Whether the timings follow c * N * log2(k + 1).
		r_squared: R-squared value of the fit.
		measured_coefficient: The fitted constant c (seconds per unit of cost).
		message: Human-readable result message.
	"""

	is_match: bool
	r_squared: float
	measured_coefficient: float
	message: str


def run_sweep(
	max_size: int = SWEEP_SIDE * SWEEP_SIDE,
	k: int = HIGH_PIXELS_NUM,
	seed: int = 0,
	step: int = 1,
	max_value: int = 0xFF,
) -> SweepResult:
	"""Check the selection against a full sort for every input size 1..max_size.

	Sizes below, equal to and above k are all visited when max_size > k. Each size
	gets fresh random samples from one generator seeded with seed.

	Args:
		max_size: Largest input size to check.
		k: Number of samples to select.
		seed: Seed for the random generator.
		step: Distance between consecutive sizes.
		max_value: Largest sample value generated (inclusive).

	Returns:
		SweepResult listing the sizes that failed.

	Raises:
		ValueError: If max_size or step is not positive.
	"""
	if max_size <= 0 or step <= 0:
		raise ValueError(f"max_size and step must be positive, got {max_size} and {step}")

	rng = np.random.default_rng(seed)
	result = SweepResult(k=k)
	for size in range(1, max_size + 1, step):
		samples = rng.integers(0, max_value, size=size, dtype=np.uint16, endpoint=True)
		if not matches_reference(samples, k).is_match:
			result.failures.append(size)
		result.checked += 1
	return result


def _time_selection(samples: np.ndarray, k: int, num_runs: int) -> float:
	times = []
	for _ in range(num_runs):
		start = time.perf_counter()
		select_top_k(samples, k, max_capacity=None)
		times.append(time.perf_counter() - start)
	# Median is less sensitive to scheduler noise
	return float(np.median(times))


def check_selection_complexity(
	k: int = HIGH_PIXELS_NUM,
	min_size: int = 1_000,
	max_size: int = 100_000,
	num_samples: int = 8,
	num_runs: int = 3,
	confidence_threshold: float = 0.85,
	seed: int = 0,
) -> ComplexityCheckResult:
	"""Check empirically that selection time grows as O(N log k).

	Times the selection for logarithmically spaced input sizes and fits
	time = c * N * log2(k + 1) with scipy's curve_fit.

	Args:
		k: Number of samples to select.
		min_size: Smallest input size timed.
		max_size: Largest input size timed.
		num_samples: Number of different input sizes.
		num_runs: Runs per size; the median is kept.
		confidence_threshold: R-squared threshold for accepting the fit (0-1).
		seed: Seed for the random generator.

	Returns:
		ComplexityCheckResult with the fit statistics.
	"""
	rng = np.random.default_rng(seed)
	sizes = np.unique(np.logspace(np.log10(min_size), np.log10(max_size), num_samples, dtype=int))

	costs = []
	timings = []
	for size in sizes:
		samples = rng.integers(0, 0xFFFF, size=int(size), dtype=np.uint16, endpoint=True)
		try:
			timings.append(_time_selection(samples, k, num_runs))
		except (MemoryError, ValueError) as e:
			warnings.warn(f"Failed to time selection with N={size}: {e}", stacklevel=2)
			continue
		costs.append(size * np.log2(k + 1))

	if len(timings) < 3:
		return ComplexityCheckResult(
			is_match=False,
			r_squared=0.0,
			measured_coefficient=0.0,
			message="Insufficient data points for analysis",
		)

	costs = np.asarray(costs, dtype=float)
	timings = np.asarray(timings, dtype=float)

	def linear_model(x, coefficient):
		return coefficient * x

	try:
		popt, _ = curve_fit(linear_model, costs, timings)
	except (RuntimeError, ValueError) as e:
		return ComplexityCheckResult(
			is_match=False,
			r_squared=0.0,
			measured_coefficient=0.0,
			message=f"Curve fitting failed: {e}",
		)

	coefficient = float(popt[0])
	ss_res = np.sum((timings - linear_model(costs, coefficient)) ** 2)
	ss_tot = np.sum((timings - np.mean(timings)) ** 2)
	r_squared = float(1 - ss_res / ss_tot) if ss_tot > 0 else 0.0

	is_match = r_squared >= confidence_threshold
	if is_match:
		message = f"Selection matches O(N log k) (R² = {r_squared:.3f}, coefficient = {coefficient:.2e})"
	else:
		message = f"Selection does NOT match O(N log k) (R² = {r_squared:.3f} < {confidence_threshold})"

	return ComplexityCheckResult(
		is_match=is_match,
		r_squared=r_squared,
		measured_coefficient=coefficient,
		message=message,
	)
