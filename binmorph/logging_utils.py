# binmorph/logging_utils.py
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List, Optional, Union


PACKAGE_LOGGER = "binmorph"

_DEFAULT_FMT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

# Library code stays silent until the application configures logging.
logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def setup_logging(
		*,
		level: Union[int, str] = "INFO",
		log_file: Optional[Union[str, Path]] = None,
		fmt: str = _DEFAULT_FMT,
		datefmt: str = _DEFAULT_DATEFMT,
		force: bool = False,
) -> logging.Logger:
	"""
	Configure the `binmorph` package logger.

	Only the package logger is touched, so the host application's root logger
	keeps its own handlers.

	:param level: Logging level, e.g. "INFO", "DEBUG", or logging.INFO.
	:param log_file: Optional path to a log file. If provided, a FileHandler is added.
	:param fmt: Log message format.
	:param datefmt: Datetime format for log entries.
	:param force: If True, remove handlers installed by a previous call first.
	:return: The configured package logger.
	"""
	if isinstance(level, str):
		level = level.upper()

	package_logger = logging.getLogger(PACKAGE_LOGGER)

	existing = [h for h in package_logger.handlers if not isinstance(h, logging.NullHandler)]
	if existing and not force:
		package_logger.setLevel(level)
		return package_logger
	for handler in existing:
		package_logger.removeHandler(handler)
		handler.close()

	handlers: List[logging.Handler] = []
	formatter = logging.Formatter(fmt=fmt, datefmt=datefmt)

	console = logging.StreamHandler(stream=sys.stderr)
	console.setFormatter(formatter)
	handlers.append(console)

	if log_file is not None:
		log_path = Path(log_file)
		log_path.parent.mkdir(parents=True, exist_ok=True)
		file_handler = logging.FileHandler(log_path, encoding="utf-8")
		file_handler.setFormatter(formatter)
		handlers.append(file_handler)

	for handler in handlers:
		package_logger.addHandler(handler)
	package_logger.setLevel(level)
	return package_logger


def get_logger(name: str) -> logging.Logger:
	"""
	Get a named logger.

	Note: Use module-level loggers: `logger = get_logger(__name__)`.

	:param name: Name of the logger.
	"""
	return logging.getLogger(name)
