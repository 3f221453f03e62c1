from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .algorithm import select_top_k


@dataclass
class ReferenceCheck:
	"""Outcome of comparing a heap selection against a full sort.

	Attributes:
		is_match: Whether both multisets of values are equal.
		expected: Reference values, highest first.
		actual: Values drained from the heap, highest first.
	"""

	is_match: bool
	expected: list[int]
	actual: list[int]


def reference_top_values(values: Sequence[int] | np.ndarray, k: int) -> list[int]:
	"""Sort a copy of values in descending order and return the first k."""
	ordered = np.sort(np.asarray(values).ravel())[::-1]
	return [int(v) for v in ordered[:k]]


def matches_reference(values: Sequence[int] | np.ndarray, k: int, **selector_options) -> ReferenceCheck:
	"""Run the selection on values and compare the result with the sorted reference."""
	heap = select_top_k(values, k, **selector_options)
	actual = [sample.value for sample in reversed(heap.drain())]
	expected = reference_top_values(values, heap.capacity)
	return ReferenceCheck(is_match=actual == expected, expected=expected, actual=actual)
