# binmorph/errors.py
from __future__ import annotations


class BinMorphError(Exception):
	"""Base class for all errors raised by binmorph."""


class InvalidArgument(BinMorphError, ValueError):
	"""A caller passed an image, mask or setting the operation cannot work with."""


class ConvergenceError(BinMorphError, RuntimeError):
	"""An iterative transform did not reach a fixpoint within the allowed sweeps."""

	def __init__(self, message: str, *, sweeps: int) -> None:
		super().__init__(message)
		self.sweeps = sweeps
