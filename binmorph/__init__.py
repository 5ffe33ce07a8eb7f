# binmorph/__init__.py
from __future__ import annotations

__version__ = "1.0.0"

from .errors import BinMorphError, InvalidArgument, ConvergenceError
from .logging_utils import setup_logging, get_logger
from .morphology import (
	erode,
	dilate,
	opening,
	closing,
	top_hat,
	bottom_hat,
	hit_and_miss,
	thin,
	border,
	shrink,
	create_mask,
)
from .morphology.compound import morphology as apply_morphology
from .config import MorphologyConfig
from .stack import morphology_stack

__all__ = [
	"BinMorphError",
	"InvalidArgument",
	"ConvergenceError",
	"setup_logging",
	"get_logger",
	"erode",
	"dilate",
	"opening",
	"closing",
	"top_hat",
	"bottom_hat",
	"hit_and_miss",
	"thin",
	"border",
	"shrink",
	"create_mask",
	"apply_morphology",
	"MorphologyConfig",
	"morphology_stack",
	"__version__",
]
