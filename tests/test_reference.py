import numpy as np
import pytest

from top_pixels.reference import matches_reference, reference_top_values
from top_pixels.tester import check_selection_complexity, run_sweep


def test_reference_top_values():
	assert reference_top_values([3, 1, 4, 1, 5, 9, 2, 6], 3) == [9, 6, 5]
	assert reference_top_values([2, 1], 5) == [2, 1]
	assert reference_top_values([], 5) == []


def test_matches_reference():
	check = matches_reference(np.array([3, 1, 4, 1, 5, 9, 2, 6], dtype=np.uint16), 3)
	assert check.is_match
	assert check.actual == [9, 6, 5]


def test_sweep_covers_sizes_around_k():
	result = run_sweep(max_size=200, k=50, step=7)
	assert result.passed
	assert result.checked == len(range(1, 201, 7))


def test_sweep_large_sizes():
	result = run_sweep(max_size=64 * 64, k=50, step=409, max_value=0xFFFF)
	assert result.passed
	assert result.failures == []


def test_sweep_rejects_bad_arguments():
	with pytest.raises(ValueError):
		run_sweep(max_size=0)
	with pytest.raises(ValueError):
		run_sweep(step=0)


def test_complexity_check_needs_enough_sizes():
	result = check_selection_complexity(k=10, min_size=100, max_size=200, num_samples=2, num_runs=1)
	assert not result.is_match
	assert result.message == "Insufficient data points for analysis"


def test_complexity_check_fits_timings():
	result = check_selection_complexity(k=10, min_size=200, max_size=2000, num_samples=4, num_runs=1)
	assert np.isfinite(result.r_squared)
	assert result.measured_coefficient > 0
	assert "O(N log k)" in result.message


def test_complexity_check_reports_failed_fit(monkeypatch):
	def fail(*args, **kwargs):
		raise RuntimeError("Optimal parameters not found")

	monkeypatch.setattr("top_pixels.tester.curve_fit", fail)
	result = check_selection_complexity(k=10, min_size=200, max_size=2000, num_samples=4, num_runs=1)
	assert not result.is_match
	assert result.message.startswith("Curve fitting failed")
