import logging
import sys

from component_locator.config import CONFIG

_LEVELS = {
	'debug': logging.DEBUG,
	'info': logging.INFO,
	'warning': logging.WARNING,
	'error': logging.ERROR,
}


class LocatorLogHandler(logging.StreamHandler):
	"""The handler ``setup_logging()`` installs; other handlers on the logger are left alone."""


def setup_logging(level: str | None = None, stream=None, force: bool = False) -> logging.Logger:
	"""Attach a single ``LocatorLogHandler`` to the ``component_locator`` logger.

	Calling it again is a no-op unless ``force`` is set, in which case the existing
	handler is replaced (e.g. to redirect output in a test). Handlers installed by
	anyone else, such as pytest's log capture, are never touched.
	"""
	log_level = _LEVELS.get((level or CONFIG.COMPONENT_LOCATOR_LOGGING_LEVEL).lower(), logging.INFO)

	logger = logging.getLogger('component_locator')
	own_handlers = [handler for handler in logger.handlers if isinstance(handler, LocatorLogHandler)]
	if own_handlers and not force:
		return logger

	for handler in own_handlers:
		logger.removeHandler(handler)

	handler = LocatorLogHandler(stream or sys.stdout)
	handler.setFormatter(logging.Formatter('%(levelname)-8s [%(name)s] %(message)s'))
	logger.addHandler(handler)
	logger.setLevel(log_level)
	logger.propagate = False

	return logger
