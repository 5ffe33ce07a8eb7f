# binmorph/morphology/__init__.py
from __future__ import annotations

from .binary import (
	foreground,
	top_hat_difference,
	bottom_hat_difference,
)
from .filters import (
	erode,
	dilate,
	hit_and_miss,
)
from .compound import (
	COMPOSITE_HANDLE_BORDERS,
	OPERATIONS,
	Operation,
	opening,
	closing,
	top_hat,
	bottom_hat,
	morphology,
)
from .thinning import (
	BORDER_MASKS,
	border,
	thin,
	shrink,
)
from .masks import (
	MASK_SHAPES,
	MaskShape,
	create_mask,
)


__all__ = [
	"foreground",
	"top_hat_difference",
	"bottom_hat_difference",
	"erode",
	"dilate",
	"hit_and_miss",
	"COMPOSITE_HANDLE_BORDERS",
	"OPERATIONS",
	"Operation",
	"opening",
	"closing",
	"top_hat",
	"bottom_hat",
	"morphology",
	"BORDER_MASKS",
	"border",
	"thin",
	"shrink",
	"MASK_SHAPES",
	"MaskShape",
	"create_mask",
]
