# binmorph/morphology/grid.py
"""
Grid and structuring element primitives.

Images and masks are plain 2-D numpy arrays. A cell is foreground when it is
nonzero. The origin of a mask is fixed at its integer half-extent.
"""
from __future__ import annotations

from typing import Any, Tuple

import numpy as np

from binmorph.errors import InvalidArgument


def as_image(image: Any) -> np.ndarray:
	"""Return `image` as a 2-D array (zero-sized images are allowed)."""
	arr = np.asarray(image)
	if arr.ndim != 2:
		raise InvalidArgument(f"image must be 2D, got shape {arr.shape}")
	return arr


def as_mask(mask: Any, name: str = "mask") -> np.ndarray:
	"""
	Return `mask` as a 2-D array with both extents > 0.

	:raises InvalidArgument: For non-2D or zero-sized masks, whose origin is undefined.
	"""
	arr = np.asarray(mask)
	if arr.ndim != 2:
		raise InvalidArgument(f"{name} must be 2D, got shape {arr.shape}")
	if arr.shape[0] == 0 or arr.shape[1] == 0:
		raise InvalidArgument(f"{name} must not be empty, got shape {arr.shape}")
	return arr


def mask_origin(mask: np.ndarray) -> Tuple[int, int]:
	"""Origin (row, col) of a structuring element: (rows // 2, cols // 2)."""
	rows, cols = mask.shape
	return rows // 2, cols // 2


def mask_exceeds(image: np.ndarray, mask: np.ndarray) -> bool:
	"""True if the mask is larger than the image in either dimension."""
	return mask.shape[0] > image.shape[0] or mask.shape[1] > image.shape[1]


def border_widths(mask: np.ndarray) -> Tuple[int, int, int, int]:
	"""
	Widths of the strips a full mask window cannot reach.

	:return: (top, bottom, left, right)
	"""
	rows, cols = mask.shape
	r_orig, c_orig = mask_origin(mask)
	return r_orig, rows - r_orig - 1, c_orig, cols - c_orig - 1


def extend_replicate(image: np.ndarray, top: int, bottom: int, left: int, right: int) -> np.ndarray:
	"""Extend an image by replicating its edge pixels outwards."""
	return np.pad(image, ((top, bottom), (left, right)), mode="edge")


def crop(image: np.ndarray, top: int, left: int, rows: int, cols: int) -> np.ndarray:
	"""Copy of the `rows` x `cols` sub-window starting at (top, left)."""
	return image[top:top + rows, left:left + cols].copy()


def clear_border(result: np.ndarray, top: int, bottom: int, left: int, right: int) -> np.ndarray:
	"""Set the given border strips of `result` to background, in place."""
	rows, cols = result.shape
	result[:min(top, rows), :] = 0
	result[max(rows - bottom, 0):, :] = 0
	result[:, :min(left, cols)] = 0
	result[:, max(cols - right, 0):] = 0
	return result
