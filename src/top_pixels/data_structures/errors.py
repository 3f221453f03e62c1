class HeapError(Exception):
	"""Base class for every failure raised by a bounded heap."""


class InvalidCapacityError(HeapError, ValueError):
	"""Capacity is not positive or exceeds the configured maximum."""


class AllocationError(HeapError, MemoryError):
	"""Backing storage for the heap could not be obtained."""


class HeapFullError(HeapError, IndexError):
	"""Push attempted while size == capacity."""


class HeapEmptyError(HeapError, IndexError):
	"""Pop or peek attempted on an empty heap."""
