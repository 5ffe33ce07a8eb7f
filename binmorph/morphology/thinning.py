# binmorph/morphology/thinning.py
"""
Iterative transforms built on eight directional hit-and-miss templates.

Each template detects a foreground pixel lying on the border of an object
facing one of eight directions (N, NE, E, SE, S, SW, W, NW rotations of
"background above, object below"). `border` collects all such pixels in one
pass; `thin` and `shrink` peel them off repeatedly.
"""
from __future__ import annotations

from typing import Any, Optional, Tuple

import numpy as np

from binmorph.errors import ConvergenceError
from binmorph.logging_utils import get_logger
from .binary import bottom_hat_difference
from .filters import hit_and_miss
from .grid import as_image

logger = get_logger(__name__)


def _template(rows: Tuple[str, str, str]) -> Tuple[np.ndarray, np.ndarray]:
	"""Build a (mask, significance) pair from rows of '0', '1' and 'x' (don't care)."""
	mask = np.array([[1 if ch == "1" else 0 for ch in row] for row in rows], dtype=np.uint8)
	significance = np.array([[0 if ch == "x" else 1 for ch in row] for row in rows], dtype=np.uint8)
	mask.setflags(write=False)
	significance.setflags(write=False)
	return mask, significance


BORDER_MASKS: Tuple[Tuple[np.ndarray, np.ndarray], ...] = (
	_template(("000", "x1x", "111")),
	_template(("x00", "110", "11x")),
	_template(("1x0", "110", "1x0")),
	_template(("11x", "110", "x00")),
	_template(("111", "x1x", "000")),
	_template(("x11", "011", "00x")),
	_template(("0x1", "011", "0x1")),
	_template(("00x", "011", "x11")),
)


def border(image: Any) -> np.ndarray:
	"""
	Border pixels of the foreground: OR of the hit-and-miss responses of all
	eight directional templates against the unmodified image.
	"""
	image = as_image(image)
	result = np.zeros(image.shape, dtype=bool)
	for mask, significance in BORDER_MASKS:
		result |= hit_and_miss(image, mask, significance) != 0
	return result.astype(image.dtype)


def _thin_sweep(work: np.ndarray) -> np.ndarray:
	# Later directions see the pixels removed by earlier ones.
	for mask, significance in BORDER_MASKS:
		work = bottom_hat_difference(work, hit_and_miss(work, mask, significance))
	return work


def _until_fixpoint(image: np.ndarray, step, name: str, max_sweeps: Optional[int]) -> np.ndarray:
	result = image
	sweeps = 0
	while True:
		if max_sweeps is not None and sweeps >= max_sweeps:
			raise ConvergenceError(
				f"{name}: no fixpoint reached within {max_sweeps} sweeps.", sweeps=sweeps
			)
		updated = step(result)
		sweeps += 1
		if np.array_equal(updated, result):
			break
		result = updated
	logger.debug("%s converged after %d sweeps.", name, sweeps)
	return result


def thin(image: Any, amount: int, *, max_sweeps: Optional[int] = None) -> np.ndarray:
	"""
	Morphological thinning.

	:param image: 2D image; nonzero pixels are foreground.
	:param amount: Number of full sweeps over the eight templates. A negative value
		sweeps until one sweep changes nothing.
	:param max_sweeps: Upper bound on sweeps for the convergence mode. None means unbounded.
	:raises ConvergenceError: If `max_sweeps` sweeps pass without reaching a fixpoint.
	:return: Thinned image with the shape and dtype of `image`.
	"""
	image = as_image(image)
	result = image.copy()

	if amount >= 0:
		for _ in range(amount):
			result = _thin_sweep(result)
		return result

	return _until_fixpoint(result, _thin_sweep, "thin", max_sweeps)


def _shrink_step(work: np.ndarray) -> np.ndarray:
	return bottom_hat_difference(work, border(work))


def shrink(image: Any, amount: int, *, max_sweeps: Optional[int] = None) -> np.ndarray:
	"""
	Remove the border of the foreground `amount` times.

	Unlike `thin`, each step removes the border found on the image as it was at
	the start of the step.

	:param image: 2D image; nonzero pixels are foreground.
	:param amount: Number of steps. A negative value shrinks until nothing changes.
	:param max_sweeps: Upper bound on steps for the convergence mode. None means unbounded.
	:raises ConvergenceError: If `max_sweeps` steps pass without reaching a fixpoint.
	:return: Shrunk image with the shape and dtype of `image`.
	"""
	image = as_image(image)
	result = image.copy()

	if amount >= 0:
		for _ in range(amount):
			result = _shrink_step(result)
		return result

	return _until_fixpoint(result, _shrink_step, "shrink", max_sweeps)
