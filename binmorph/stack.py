# binmorph/stack.py
"""
Apply one configured 2D operation to every image of a stack.

The trailing two axes of the input are the image rows and columns; any
leading axes (frames, channels, tiles, ...) are iterated over. Morphology
itself stays two-dimensional: images never influence each other.
"""
from __future__ import annotations

from typing import Any

import numpy as np
from tqdm import tqdm

from binmorph.config import MorphologyConfig
from binmorph.errors import InvalidArgument
from binmorph.logging_utils import get_logger

logger = get_logger(__name__)


def morphology_stack(
		images: Any,
		config: MorphologyConfig,
		*,
		progress: bool = True,
) -> np.ndarray:
	"""
	Run `config.apply` on each 2D image of `images`.

	:param images: Array of shape (..., rows, cols).
	:param config: The operation to apply.
	:param progress: Show a tqdm progress bar over the images.
	:raises InvalidArgument: If `images` has fewer than two dimensions.
	:return: Array with the shape and dtype of `images`.
	"""
	images = np.asarray(images)
	if images.ndim < 2:
		raise InvalidArgument(f"images must be at least 2D, got shape {images.shape}")
	if images.ndim == 2:
		return config.apply(images)

	stack_shape = images.shape[:-2]
	rows, cols = images.shape[-2:]

	# Flatten leading dims
	flat = images.reshape((-1, rows, cols))
	out = np.empty_like(flat)

	mask = config.build_mask()
	logger.debug(
		"Applying %s with a %dx%d mask to %d images.",
		config.operation, mask.shape[0], mask.shape[1], flat.shape[0]
	)

	for i in tqdm(range(flat.shape[0]), disable=not progress):
		out[i] = config.apply(flat[i])

	return out.reshape((*stack_shape, rows, cols))
