from .algorithm import HIGH_PIXELS_NUM, TopKSelector, highest_first, select_top_k
from .data_structures import (
	MAX_HEAP_CAPACITY,
	AllocationError,
	BoundedMinHeap,
	HeapEmptyError,
	HeapError,
	HeapFullError,
	InvalidCapacityError,
)
from .types import Pixel, Sample

__all__ = [
	"HIGH_PIXELS_NUM",
	"MAX_HEAP_CAPACITY",
	"AllocationError",
	"BoundedMinHeap",
	"HeapEmptyError",
	"HeapError",
	"HeapFullError",
	"InvalidCapacityError",
	"Pixel",
	"Sample",
	"TopKSelector",
	"highest_first",
	"select_top_k",
]
