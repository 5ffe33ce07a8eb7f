# binmorph/morphology/compound.py
"""
Transforms composed from erosion and dilation, and the operation dispatcher.

- opening:    dilate(erode(image))
- closing:    erode(dilate(image))
- top_hat:    image minus its opening (whole image)
- bottom_hat: closing minus image (central region only)
"""
from __future__ import annotations

from typing import Any, Literal

import numpy as np

from binmorph.logging_utils import get_logger
from .binary import bottom_hat_difference, top_hat_difference
from .filters import dilate, erode
from .grid import as_image, as_mask, mask_origin

logger = get_logger(__name__)

Operation = Literal["erode", "dilate", "open", "close", "tophat", "bottomhat"]

OPERATIONS = ("erode", "dilate", "open", "close", "tophat", "bottomhat")

# Border policy of the erosion inside opening and closing.
COMPOSITE_HANDLE_BORDERS = True


def opening(image: Any, mask: Any) -> np.ndarray:
	"""Erosion followed by dilation with the same mask. Anti-extensive and idempotent."""
	return dilate(erode(image, mask, COMPOSITE_HANDLE_BORDERS), mask)


def closing(image: Any, mask: Any) -> np.ndarray:
	"""Dilation followed by erosion with the same mask."""
	return erode(dilate(image, mask), mask, COMPOSITE_HANDLE_BORDERS)


def top_hat(image: Any, mask: Any) -> np.ndarray:
	"""
	White top-hat: foreground of `image` removed by the opening.

	Isolates features smaller than the structuring element.
	"""
	image = as_image(image)
	return top_hat_difference(opening(image, mask), image)


def bottom_hat(image: Any, mask: Any) -> np.ndarray:
	"""
	Black top-hat: foreground added by the closing.

	The difference is only taken inside the central region
	[rOrig, rows - (maskRows - rOrig)) x [cOrig, cols - (maskCols - cOrig));
	outside it the closed image is returned as is.

	:return: 0/1 array with the shape and dtype of `image`.
	"""
	image = as_image(image)
	mask = as_mask(mask)
	closed = closing(image, mask)

	mask_rows, mask_cols = mask.shape
	r_orig, c_orig = mask_origin(mask)
	r_end = image.shape[0] - (mask_rows - r_orig)
	c_end = image.shape[1] - (mask_cols - c_orig)
	if r_end > r_orig and c_end > c_orig:
		centre = (slice(r_orig, r_end), slice(c_orig, c_end))
		closed[centre] = bottom_hat_difference(closed[centre], image[centre])
	return closed


def morphology(
		image: Any,
		mask: Any,
		operation: Operation,
		handle_borders: bool = False,
) -> np.ndarray:
	"""
	Apply one morphological operation.

	:param image: 2D image; nonzero pixels are foreground.
	:param mask: 2D structuring element.
	:param operation: One of "erode", "dilate", "open", "close", "tophat", "bottomhat".
	:param handle_borders: Border policy, used by "erode" only.
	:return: Result image. An unknown operation returns a copy of `image`.
	"""
	if operation == "erode":
		return erode(image, mask, handle_borders)
	if operation == "dilate":
		return dilate(image, mask)
	if operation == "open":
		return opening(image, mask)
	if operation == "close":
		return closing(image, mask)
	if operation == "tophat":
		return top_hat(image, mask)
	if operation == "bottomhat":
		return bottom_hat(image, mask)

	logger.warning("morphology: Unknown operation %r, returning the input unchanged.", operation)
	return np.array(image, copy=True)
