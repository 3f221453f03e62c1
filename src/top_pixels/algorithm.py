import operator
import warnings
from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from .data_structures import MAX_HEAP_CAPACITY, BoundedMinHeap, HeapError, InvalidCapacityError
from .types import Sample

HIGH_PIXELS_NUM = MAX_HEAP_CAPACITY


class TopKSelector:
	"""Single-pass selection of the k largest samples with a bounded min-heap."""

	def __init__(self, k: int, max_capacity: int | None = MAX_HEAP_CAPACITY, dtype: npt.DTypeLike = np.uint16):
		"""
		Configure a selector for k samples.
		A k above max_capacity is capped to it (with a warning).
		Raises InvalidCapacityError if k is not positive.
		"""
		k = operator.index(k)
		if k <= 0:
			raise InvalidCapacityError(f"k must be positive, got {k}")
		if max_capacity is not None and k > max_capacity:
			warnings.warn(f"k={k} exceeds the maximum heap capacity, using {max_capacity}", stacklevel=2)
			k = max_capacity
		self.k = k
		self.max_capacity = max_capacity
		self.dtype = dtype

	def new_heap(self) -> BoundedMinHeap:
		return BoundedMinHeap(self.k, max_capacity=self.max_capacity, dtype=self.dtype)

	def select(self, values: Sequence[int] | np.ndarray, heap: BoundedMinHeap | None = None) -> BoundedMinHeap:
		"""
		Scan values once, keeping the k largest in the heap.
		A tying value never evicts the current minimum, so earlier samples win ties
		at the eviction boundary. On any heap failure the heap is cleared and the
		error is re-raised.
		"""
		if heap is None:
			heap = self.new_heap()
		if isinstance(values, np.ndarray):
			values = values.ravel()

		try:
			for i, value in enumerate(values):
				if heap.is_full() and value > heap.peek_min():
					heap.pop_min()
				if not heap.is_full():
					heap.push(i, value)
		except (HeapError, TypeError, ValueError):
			heap.clear()
			raise

		return heap


def select_top_k(
	values: Sequence[int] | np.ndarray,
	k: int = HIGH_PIXELS_NUM,
	max_capacity: int | None = MAX_HEAP_CAPACITY,
	dtype: npt.DTypeLike = np.uint16,
) -> BoundedMinHeap:
	"""Return a heap holding the min(N, k) largest samples of values and their positions."""
	return TopKSelector(k, max_capacity=max_capacity, dtype=dtype).select(values)


def highest_first(heap: BoundedMinHeap) -> list[Sample]:
	"""Drain heap and return its samples from highest to lowest value."""
	drained = heap.drain()
	drained.reverse()
	return drained
