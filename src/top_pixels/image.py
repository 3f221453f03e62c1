import numpy as np

from .algorithm import HIGH_PIXELS_NUM, highest_first, select_top_k
from .types import Pixel

IMAGE_ROWS = 256
IMAGE_COLUMNS = 256


def generate_image(rows: int = IMAGE_ROWS, columns: int = IMAGE_COLUMNS, seed: int = 0, max_value: int = 0xFF) -> np.ndarray:
	"""Generate a reproducible random 16-bit image.

	Args:
		rows: Number of image rows.
		columns: Number of image columns (the row length).
		seed: Seed for the random generator.
		max_value: Largest pixel value produced (inclusive).

	Returns:
		A (rows, columns) uint16 array with values in [0, max_value].

	Raises:
		ValueError: If a dimension is not positive or max_value is outside [0, 0xFFFF].
	"""
	if rows <= 0 or columns <= 0:
		raise ValueError(f"image dimensions must be positive, got {rows}x{columns}")
	if not 0 <= max_value <= 0xFFFF:
		raise ValueError(f"max_value {max_value} does not fit in 16 bits")

	rng = np.random.default_rng(seed)
	return rng.integers(0, max_value, size=(rows, columns), dtype=np.uint16, endpoint=True)


def decode_position(position: int, row_length: int) -> tuple[int, int]:
	"""Split a flat position into (row, column) for rows of row_length samples."""
	if row_length <= 0:
		raise ValueError(f"row_length must be positive, got {row_length}")
	if position < 0:
		raise ValueError(f"position must be non-negative, got {position}")
	return divmod(position, row_length)


def top_pixels(image: np.ndarray, k: int = HIGH_PIXELS_NUM) -> list[Pixel]:
	"""Return the k brightest pixels of a 2-D image, brightest first."""
	if image.ndim != 2:
		raise ValueError(f"expected a 2-D image, got {image.ndim} dimensions")

	row_length = image.shape[1]
	pixels = []
	for sample in highest_first(select_top_k(image, k, dtype=image.dtype)):
		row, column = decode_position(sample.position, row_length)
		pixels.append(Pixel(row=row, column=column, value=sample.value))
	return pixels
