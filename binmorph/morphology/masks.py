# binmorph/morphology/masks.py
"""
Structuring element generators.

Shapes
------
- rectangular: every cell is foreground (also used for unknown shapes)
- elliptical:  cells whose centre lies inside the inscribed ellipse
- diamond:     a rhombus spanning the full width on the middle row(s)
"""
from __future__ import annotations

import math
from typing import Literal

import numpy as np

from binmorph.errors import InvalidArgument
from binmorph.logging_utils import get_logger

logger = get_logger(__name__)

MaskShape = Literal["rectangular", "elliptical", "diamond"]

MASK_SHAPES = ("rectangular", "elliptical", "diamond")


def _fill_elliptical(mask: np.ndarray) -> None:
	rows, cols = mask.shape
	a = cols / 2
	b = rows / 2

	for r in range(rows):
		y = r + 0.5
		x = a * math.sqrt(1 - (y - b) * (y - b) / (b * b))
		left = a - x
		right = a + x
		for c in range(cols):
			if left < c + 0.5 < right:
				mask[r, c] = 1


def _fill_diamond_row(mask: np.ndarray, r: int, offset: float, kc: int) -> None:
	cols = mask.shape[1]
	# int() truncates toward zero, which keeps the leftmost column at >= 0
	for c in range(int(offset - kc - 0.5), int(cols - offset - kc + 0.5)):
		mask[r, c + kc] = 1


def _fill_diamond(mask: np.ndarray) -> None:
	rows, cols = mask.shape
	step = (cols / 2) / (rows / 2)
	kc = cols // 2

	# Even heights have two middle rows.
	upper = rows // 2 - (1 if rows % 2 == 0 else 0)
	lower = rows // 2

	offset = 0.0
	for r in range(upper, -1, -1):
		_fill_diamond_row(mask, r, offset, kc)
		offset += step

	offset = 0.0
	for r in range(lower, rows):
		_fill_diamond_row(mask, r, offset, kc)
		offset += step


def create_mask(
		shape: MaskShape = "rectangular",
		rows: int = 3,
		cols: int = 0,
		*,
		dtype: np.dtype = np.uint8,
) -> np.ndarray:
	"""
	Create a binary structuring element.

	:param shape: "rectangular", "elliptical" or "diamond". Unknown shapes give a rectangle.
	:param rows: Number of rows. Zero gives an empty 0x0 mask.
	:param cols: Number of columns. Zero means a square mask (cols = rows).
	:param dtype: Element type of the mask.
	:raises InvalidArgument: For negative extents.
	:return: `rows` x `cols` array of zeros and ones.
	"""
	rows = int(rows)
	cols = int(cols)
	if rows < 0 or cols < 0:
		raise InvalidArgument(f"Mask extents must be >= 0, got {rows}x{cols}.")

	if cols == 0:
		cols = rows
	if rows == 0:
		return np.zeros((0, 0), dtype=dtype)

	mask = np.zeros((rows, cols), dtype=dtype)
	if shape == "elliptical":
		_fill_elliptical(mask)
	elif shape == "diamond":
		_fill_diamond(mask)
	else:
		if shape not in MASK_SHAPES:
			logger.debug("create_mask: Unknown shape %r, using a rectangular mask.", shape)
		mask[...] = 1

	return mask
