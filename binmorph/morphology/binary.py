# binmorph/morphology/binary.py
from __future__ import annotations

import numpy as np


def foreground(grid: np.ndarray) -> np.ndarray:
	"""Boolean presence mask: True where the pixel is nonzero."""
	return np.asarray(grid) != 0


def top_hat_difference(first: np.ndarray, second: np.ndarray) -> np.ndarray:
	"""
	Pixelwise `foreground(second) - foreground(first)`, clamped to {0, 1}.

	:return: Array with the shape and dtype of `first`.
	"""
	first = np.asarray(first)
	return (foreground(second) & ~foreground(first)).astype(first.dtype)


def bottom_hat_difference(first: np.ndarray, second: np.ndarray) -> np.ndarray:
	"""
	Pixelwise `foreground(first) - foreground(second)`, clamped to {0, 1}.

	Also used to peel matched pixels off a working image while thinning.

	:return: Array with the shape and dtype of `first`.
	"""
	first = np.asarray(first)
	return (foreground(first) & ~foreground(second)).astype(first.dtype)
