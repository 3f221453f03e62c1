import operator

import numpy as np
import numpy.typing as npt

from ..types import Sample
from .errors import AllocationError, HeapEmptyError, HeapFullError, InvalidCapacityError

MAX_HEAP_CAPACITY = 50


class BoundedMinHeap:
	"""
	Fixed-capacity binary min-heap over (position, value) pairs, ordered by value.

	Positions and values live in two parallel arrays of length `capacity`; slot i of
	both arrays forms one entry. Index 0 always holds the smallest stored value, the
	parent of slot i is (i - 1) // 2 and its children are 2i + 1 and 2i + 2.

	A failed push or pop leaves the size and both arrays untouched.

	Attributes:
		capacity: Maximum number of entries, fixed at construction.
		max_capacity: Upper limit accepted for `capacity` (None for no limit).
		dtype: Integer dtype of the value array; pushed values must fit in it.
	"""

	__slots__ = ("_capacity", "_dtype", "_limits", "_positions", "_size", "_values", "max_capacity")

	def __init__(
		self,
		capacity: int,
		max_capacity: int | None = MAX_HEAP_CAPACITY,
		dtype: npt.DTypeLike = np.uint16,
	) -> None:
		"""Allocate an empty heap.

		Args:
			capacity: Number of entries the heap can hold.
			max_capacity: Largest capacity accepted; None lifts the limit.
			dtype: Integer dtype used to store values.

		Raises:
			InvalidCapacityError: If capacity is zero, negative or above max_capacity.
			AllocationError: If the backing arrays cannot be allocated.
			ValueError: If dtype is not an integer dtype.
		"""
		capacity = operator.index(capacity)
		if capacity <= 0:
			raise InvalidCapacityError(f"capacity must be positive, got {capacity}")
		if max_capacity is not None and capacity > max_capacity:
			raise InvalidCapacityError(f"capacity {capacity} exceeds maximum {max_capacity}")

		self._dtype = np.dtype(dtype)
		if not np.issubdtype(self._dtype, np.integer):
			raise ValueError(f"dtype must be an integer dtype, got {self._dtype}")
		self._limits = np.iinfo(self._dtype)

		try:
			self._positions = np.empty(capacity, dtype=np.intp)
			self._values = np.empty(capacity, dtype=self._dtype)
		except MemoryError as e:
			raise AllocationError(f"cannot allocate storage for {capacity} entries") from e

		self._capacity = capacity
		self._size = 0
		self.max_capacity = max_capacity

	@property
	def capacity(self) -> int:
		return self._capacity

	@property
	def dtype(self) -> np.dtype:
		return self._dtype

	@property
	def size(self) -> int:
		return self._size

	@property
	def values(self) -> np.ndarray:
		"""Read-only view of the stored values, in heap (not sorted) order."""
		view = self._values[: self._size]
		view.flags.writeable = False
		return view

	@property
	def positions(self) -> np.ndarray:
		"""Read-only view of the stored positions, parallel to `values`."""
		view = self._positions[: self._size]
		view.flags.writeable = False
		return view

	def is_full(self) -> bool:
		return self._size == self._capacity

	def is_empty(self) -> bool:
		return self._size == 0

	def peek_min(self) -> int:
		"""Return the smallest stored value.

		Raises:
			HeapEmptyError: If the heap holds no entries.
		"""
		if self._size == 0:
			raise HeapEmptyError("peek on empty heap")
		return int(self._values[0])

	def push(self, position: int, value: int) -> None:
		"""Insert a (position, value) entry.

		The new entry starts in the first free slot and moves towards the root while
		its parent's value is not smaller than it, so an equal value ends up above
		the entries it ties with.

		Time Complexity: O(log capacity)

		Args:
			position: Non-negative index of the sample in the flat input.
			value: Sample value, within the range of the heap's dtype.

		Raises:
			HeapFullError: If size == capacity.
			ValueError: If position or value is not an integer, position is negative
				or value does not fit the dtype.
		"""
		if self._size >= self._capacity:
			raise HeapFullError(f"push on full heap (capacity {self._capacity})")

		try:
			position = operator.index(position)
			value = operator.index(value)
		except TypeError as e:
			raise ValueError(f"position and value must be integers, got {position!r} and {value!r}") from e
		if position < 0:
			raise ValueError(f"position must be non-negative, got {position}")
		if not self._limits.min <= value <= self._limits.max:
			raise ValueError(f"value {value} does not fit in {self._dtype}")

		positions, values = self._positions, self._values
		slot = self._size
		while slot > 0:
			parent = (slot - 1) // 2
			if values[parent] < value:
				break
			# Shift the parent down instead of swapping
			values[slot] = values[parent]
			positions[slot] = positions[parent]
			slot = parent

		values[slot] = value
		positions[slot] = position
		self._size += 1

	def pop_min(self) -> int:
		"""Remove the entry with the smallest value and return its position.

		The last entry is moved to the root and sifted down: at each level the
		smaller child moves up while it is strictly smaller than the sifted value.

		Time Complexity: O(log capacity)

		Returns:
			The position that was stored at the root.

		Raises:
			HeapEmptyError: If the heap holds no entries.
		"""
		if self._size == 0:
			raise HeapEmptyError("pop from empty heap")

		positions, values = self._positions, self._values
		top = int(positions[0])
		self._size -= 1
		last = self._size
		if last == 0:
			return top

		value = values[last]
		position = positions[last]
		slot = 0
		while True:
			child = self._smaller_child(slot)
			if child is None or not values[child] < value:
				break
			values[slot] = values[child]
			positions[slot] = positions[child]
			slot = child

		values[slot] = value
		positions[slot] = position
		return top

	def _smaller_child(self, parent: int) -> int | None:
		left = 2 * parent + 1
		if left >= self._size:
			return None
		right = left + 1
		if right >= self._size:
			return left
		return right if self._values[right] < self._values[left] else left

	def samples(self) -> list[Sample]:
		"""Return the stored entries in storage order, without removing them."""
		return [Sample(int(p), int(v)) for p, v in zip(self.positions, self.values, strict=True)]

	def drain(self) -> list[Sample]:
		"""Pop every entry, returning them in ascending value order."""
		drained = []
		while self._size:
			value = int(self._values[0])
			drained.append(Sample(self.pop_min(), value))
		return drained

	def clear(self) -> None:
		"""Discard every entry; capacity and storage are kept."""
		self._size = 0

	def check_invariant(self) -> bool:
		"""Return True if every stored parent value is <= the values of its children."""
		if self._size < 2:
			return True
		values = self._values[: self._size]
		children = np.arange(1, self._size)
		return bool(np.all(values[(children - 1) // 2] <= values[children]))

	def __len__(self) -> int:
		return self._size

	def __bool__(self) -> bool:
		return self._size > 0

	def __repr__(self) -> str:
		return f"BoundedMinHeap(capacity={self._capacity}, size={self._size}, samples={self.samples()!r})"
