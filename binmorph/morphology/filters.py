# binmorph/morphology/filters.py
"""
Base binary transforms: erosion, dilation and the hit-and-miss transform.

Every window test is a min/max filter over the foreground indicator with the
structuring element as footprint. The footprint cell at (mr, mc) is aligned
with image pixel (i + mr - rOrig, j + mc - cOrig), which is also where
scipy.ndimage places the centre of a footprint (index size // 2 per axis).
"""
from __future__ import annotations

from typing import Any

import numpy as np
from scipy import ndimage

from binmorph.errors import InvalidArgument
from binmorph.logging_utils import get_logger
from .binary import foreground
from .grid import (
	as_image,
	as_mask,
	border_widths,
	clear_border,
	crop,
	extend_replicate,
	mask_exceeds,
)

logger = get_logger(__name__)


def _fits(fg: np.ndarray, footprint: np.ndarray) -> np.ndarray:
	"""
	Pixels where every footprint cell, placed with the origin on the pixel, lands on `fg`.

	Only pixels whose window lies fully inside `fg` are meaningful; callers crop
	or clear the rest.
	"""
	if not footprint.any():
		return np.ones(fg.shape, dtype=bool)
	fitted = ndimage.minimum_filter(fg.astype(np.uint8), footprint=footprint, mode="nearest")
	return fitted != 0


def erode(image: Any, mask: Any, handle_borders: bool = False) -> np.ndarray:
	"""
	Binary erosion.

	Pixel (i, j) is foreground iff the foreground of `mask`, placed with its
	origin on (i, j), is a subset of the image foreground.

	:param image: 2D image; nonzero pixels are foreground.
	:param mask: 2D structuring element with origin (rows // 2, cols // 2).
	:param handle_borders: If True, the image is edge-replicated before eroding so
		that every output pixel is defined. If False, pixels whose window leaves
		the image are background.
	:return: 0/1 array with the shape and dtype of `image`. If the mask is larger
		than the image and `handle_borders` is False, a copy of `image`.
	"""
	image = as_image(image)
	mask = as_mask(mask)
	if image.size == 0:
		return np.zeros_like(image)

	top, bottom, left, right = border_widths(mask)

	if mask_exceeds(image, mask):
		logger.warning(
			"erode(image, mask): Mask %s cannot be larger than image %s.", mask.shape, image.shape
		)
		if not handle_borders:
			return image.copy()

	work = extend_replicate(image, top, bottom, left, right) if handle_borders else image
	result = _fits(foreground(work), foreground(mask)).astype(image.dtype)

	if handle_borders:
		return crop(result, top, left, image.shape[0], image.shape[1])
	return clear_border(result, top, bottom, left, right)


def dilate(image: Any, mask: Any) -> np.ndarray:
	"""
	Binary dilation (Minkowski union).

	Pixel (i, j) is foreground iff some foreground mask cell (mr, mc) meets a
	foreground image pixel at (i - mr + rOrig, j - mc + cOrig). Pixels outside
	the image count as background.

	:param image: 2D image; nonzero pixels are foreground.
	:param mask: 2D structuring element with origin (rows // 2, cols // 2).
	:return: 0/1 array with the shape and dtype of `image`. A mask larger than the image is
		logged as a warning; the result is still the clipped union.
	"""
	image = as_image(image)
	mask = as_mask(mask)
	result = np.zeros_like(image)
	if image.size == 0:
		return result

	if mask_exceeds(image, mask):
		logger.warning(
			"dilate(image, mask): Mask %s cannot be larger than image %s.", mask.shape, image.shape
		)

	# Reflect the mask; for even extents the reflected origin moves one cell left/up.
	footprint = np.ascontiguousarray(foreground(mask)[::-1, ::-1])
	if not footprint.any():
		return result
	origin = tuple(n - 1 - 2 * (n // 2) for n in mask.shape)

	hits = ndimage.maximum_filter(
		foreground(image).astype(np.uint8),
		footprint=footprint,
		mode="constant",
		cval=0,
		origin=origin,
	)
	return (hits != 0).astype(image.dtype)


def hit_and_miss(image: Any, mask: Any, significance: Any) -> np.ndarray:
	"""
	Hit-and-miss transform.

	Pixel (i, j) is foreground iff, on every cell where `significance` is set,
	the mask bit equals the foreground bit of the image under it. Cells with a
	zero significance are "don't care".

	Image borders are not handled: pixels whose window leaves the image are
	always background.

	:param image: 2D image; nonzero pixels are foreground.
	:param mask: 2D structuring element.
	:param significance: Flags with the shape of `mask`.
	:return: 0/1 array with the shape and dtype of `image`. If the mask is larger
		than the image, a copy of `image`.
	"""
	image = as_image(image)
	mask = as_mask(mask)
	significance = as_mask(significance, name="significance")
	if significance.shape != mask.shape:
		raise InvalidArgument(
			f"significance must have the shape of mask, got {significance.shape} vs {mask.shape}."
		)
	if image.size == 0:
		return np.zeros_like(image)

	if mask_exceeds(image, mask):
		logger.warning(
			"hit_and_miss(image, mask, significance): Mask %s cannot be larger than image %s.",
			mask.shape, image.shape
		)
		return image.copy()

	fg = foreground(image)
	significant = foreground(significance)
	wanted = foreground(mask)

	hits = _fits(fg, significant & wanted) & _fits(~fg, significant & ~wanted)
	return clear_border(hits.astype(image.dtype), *border_widths(mask))
