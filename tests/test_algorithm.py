import numpy as np
import pytest

from top_pixels.algorithm import TopKSelector, highest_first, select_top_k
from top_pixels.data_structures import MAX_HEAP_CAPACITY, BoundedMinHeap, HeapEmptyError, InvalidCapacityError
from top_pixels.reference import reference_top_values


def test_small_input():
	heap = select_top_k([3, 1, 4, 1, 5, 9, 2, 6], 3)
	drained = heap.drain()
	assert [s.value for s in drained] == [5, 6, 9]
	assert drained[-1].position == 5


def test_empty_input():
	heap = select_top_k([], 3)
	assert heap.is_empty()
	with pytest.raises(HeapEmptyError):
		heap.pop_min()


def test_ties_keep_earliest():
	heap = select_top_k([7, 7, 7], 2)
	assert sorted(heap.samples()) == [(0, 7), (1, 7)]


def test_tie_with_minimum_is_dropped():
	heap = select_top_k([4, 2, 8, 4], 2)
	assert sorted(s.position for s in heap.samples()) == [0, 2]


def test_fewer_samples_than_k():
	heap = select_top_k([10, 30, 20], 5)
	assert heap.capacity == 5
	assert len(heap) == 3
	assert [s.value for s in highest_first(heap)] == [30, 20, 10]


def test_positions_point_at_values():
	rng = np.random.default_rng(7)
	samples = rng.integers(0, 256, size=1000, dtype=np.uint16)
	heap = select_top_k(samples, 20)
	assert heap.check_invariant()
	for sample in heap.samples():
		assert samples[sample.position] == sample.value


def test_two_dimensional_input_is_scanned_flat():
	image = np.array([[1, 9, 3], [8, 2, 7]], dtype=np.uint16)
	top = highest_first(select_top_k(image, 3))
	assert [(s.position, s.value) for s in top] == [(1, 9), (3, 8), (5, 7)]


@pytest.mark.parametrize("size", [1, 25, 49, 50, 51, 500, 4096])
def test_matches_sorted_reference(size):
	rng = np.random.default_rng(size)
	samples = rng.integers(0, 256, size=size, dtype=np.uint16)
	heap = select_top_k(samples, 50)
	assert len(heap) == min(size, 50)
	drained = [s.value for s in heap.drain()]
	assert drained == sorted(drained)
	assert drained[::-1] == reference_top_values(samples, 50)


def test_k_is_capped_to_max_capacity():
	with pytest.warns(UserWarning):
		selector = TopKSelector(MAX_HEAP_CAPACITY + 10)
	assert selector.k == MAX_HEAP_CAPACITY


def test_k_without_limit():
	heap = select_top_k(list(range(200)), 100, max_capacity=None)
	assert [s.value for s in heap.drain()] == list(range(100, 200))


@pytest.mark.parametrize("k", [0, -3])
def test_invalid_k(k):
	with pytest.raises(InvalidCapacityError):
		select_top_k([1, 2, 3], k)


def test_caller_supplied_heap_is_filled():
	heap = BoundedMinHeap(2)
	result = TopKSelector(2).select([5, 1, 6], heap=heap)
	assert result is heap
	assert sorted(s.value for s in heap.samples()) == [5, 6]


def test_failed_scan_discards_partial_results():
	heap = BoundedMinHeap(3)
	with pytest.raises(ValueError):
		TopKSelector(3).select([4, 5, -1], heap=heap)
	assert heap.is_empty()


def test_non_integer_sample_discards_partial_results():
	heap = BoundedMinHeap(3)
	with pytest.raises(ValueError):
		TopKSelector(3).select([4, 5, 2.5], heap=heap)
	assert heap.is_empty()


def test_float_array_is_rejected():
	with pytest.raises(ValueError):
		select_top_k(np.array([1.5, 2.5, 3.5]), 2)


@pytest.mark.parametrize("k", [0, -3])
def test_selector_rejects_invalid_k(k):
	with pytest.raises(InvalidCapacityError):
		TopKSelector(k)


def test_invalid_k_rejected_before_scanning_supplied_heap():
	heap = BoundedMinHeap(2)
	with pytest.raises(InvalidCapacityError):
		TopKSelector(0).select([1, 2, 3], heap=heap)
	assert heap.is_empty()
