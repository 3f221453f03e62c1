from .bounded_min_heap import MAX_HEAP_CAPACITY, BoundedMinHeap
from .errors import AllocationError, HeapEmptyError, HeapError, HeapFullError, InvalidCapacityError

__all__ = [
	"MAX_HEAP_CAPACITY",
	"AllocationError",
	"BoundedMinHeap",
	"HeapEmptyError",
	"HeapError",
	"HeapFullError",
	"InvalidCapacityError",
]
