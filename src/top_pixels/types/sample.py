from typing import NamedTuple, TypedDict


class Sample(NamedTuple):
	"""
	A value read from the flat input together with where it was read.

	Attributes:
		position: Index into the flat input, in [0, N).
		value: The sample value.
	"""

	position: int
	value: int


class Pixel(TypedDict):
	"""
	A selected sample decoded back into image coordinates.

	Attributes:
		row: position // row_length.
		column: position % row_length.
		value: The pixel value.
	"""

	row: int
	column: int
	value: int
