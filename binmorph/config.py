# binmorph/config.py
"""
Typed configuration of a morphology step.

A `MorphologyConfig` holds everything needed to turn an image into a result:
the operation, the structuring element (generated or explicit) and the border
policy. Values are validated once, when the object is built.
"""
from __future__ import annotations

from dataclasses import dataclass, field, fields
from typing import Any, Dict, Hashable, Mapping, Optional, Tuple

import numpy as np

from binmorph.errors import InvalidArgument
from binmorph.logging_utils import get_logger
from binmorph.morphology.compound import OPERATIONS, Operation, morphology
from binmorph.morphology.grid import as_mask
from binmorph.morphology.masks import MASK_SHAPES, MaskShape, create_mask

logger = get_logger(__name__)


def _as_int(value: Any, name: str) -> int:
	try:
		return int(value)
	except (TypeError, ValueError) as e:
		raise InvalidArgument(f"{name} must be an integer, got {value!r}.") from e


@dataclass(frozen=True, slots=True, eq=False)
class MorphologyConfig:
	"""
	Settings of one morphology step.

	operation: one of "erode", "dilate", "open", "close", "tophat", "bottomhat"
	mask_shape: generated structuring element shape
	mask_rows, mask_cols: generated mask size (mask_cols == 0 means square)
	handle_borders: border policy of a plain erosion
	mask: explicit structuring element; overrides mask_shape/mask_rows/mask_cols
	"""
	operation: Operation = "erode"
	mask_shape: MaskShape = "rectangular"
	mask_rows: int = 3
	mask_cols: int = 0
	handle_borders: bool = False
	mask: Optional[np.ndarray] = field(default=None, compare=False)

	def __post_init__(self) -> None:
		if self.operation not in OPERATIONS:
			raise InvalidArgument(f"operation must be one of {OPERATIONS}, got {self.operation!r}.")
		if self.mask_shape not in MASK_SHAPES:
			raise InvalidArgument(f"mask_shape must be one of {MASK_SHAPES}, got {self.mask_shape!r}.")
		mask_rows = _as_int(self.mask_rows, "mask_rows")
		mask_cols = _as_int(self.mask_cols, "mask_cols")
		if mask_rows <= 0:
			raise InvalidArgument(f"mask_rows must be > 0, got {self.mask_rows}.")
		if mask_cols < 0:
			raise InvalidArgument(f"mask_cols must be >= 0, got {self.mask_cols}.")
		object.__setattr__(self, "mask_rows", mask_rows)
		object.__setattr__(self, "mask_cols", mask_cols)
		if not isinstance(self.handle_borders, (bool, np.bool_)):
			raise InvalidArgument(f"handle_borders must be a bool, got {self.handle_borders!r}.")

		if self.mask is not None:
			explicit = np.array(as_mask(self.mask), copy=True)
			explicit.setflags(write=False)
			object.__setattr__(self, "mask", explicit)

	def build_mask(self) -> np.ndarray:
		"""Structuring element used by `apply`."""
		if self.mask is not None:
			return self.mask
		return create_mask(self.mask_shape, self.mask_rows, self.mask_cols)

	def apply(self, image: Any) -> np.ndarray:
		"""Run the configured operation on one 2D image."""
		return morphology(image, self.build_mask(), self.operation, self.handle_borders)

	@classmethod
	def from_dict(cls, values: Mapping[str, Any]) -> MorphologyConfig:
		"""
		Build a config from plain values (e.g. parsed JSON).

		:raises InvalidArgument: For unknown keys or invalid values.
		"""
		known = {f.name for f in fields(cls)}
		unknown = sorted(set(values) - known)
		if unknown:
			raise InvalidArgument(f"Unknown configuration keys: {unknown}.")

		kwargs = dict(values)
		if kwargs.get("mask") is not None:
			kwargs["mask"] = np.asarray(kwargs["mask"])
		return cls(**kwargs)

	def to_dict(self) -> Dict[str, Any]:
		"""Plain, JSON-friendly representation."""
		out: Dict[str, Any] = {
			"operation": self.operation,
			"mask_shape": self.mask_shape,
			"mask_rows": int(self.mask_rows),
			"mask_cols": int(self.mask_cols),
			"handle_borders": bool(self.handle_borders),
		}
		if self.mask is not None:
			out["mask"] = self.mask.tolist()
		return out

	def _key(self) -> Tuple[Hashable, ...]:
		# Masks compare by shape and foreground/values, not by identity.
		mask_key = None
		if self.mask is not None:
			mask_key = (self.mask.shape, tuple(self.mask.ravel().tolist()))
		return (
			self.operation,
			self.mask_shape,
			self.mask_rows,
			self.mask_cols,
			bool(self.handle_borders),
			mask_key,
		)

	def __eq__(self, other: object) -> bool:
		if not isinstance(other, MorphologyConfig):
			return NotImplemented
		return self._key() == other._key()

	def __hash__(self) -> int:
		return hash(self._key())
