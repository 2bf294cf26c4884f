import logging

from component_locator.ui.views import UI

logger = logging.getLogger(__name__)


class MockUI:
	"""Holds the current UI of a browser-less test.

	Tests are single-threaded, so the current UI is plain module state: ``setup()``
	replaces it with a fresh, empty UI and ``tear_down()`` forgets it.
	"""

	_current: UI | None = None

	@classmethod
	def setup(cls, location: str = '') -> UI:
		cls._current = UI(location=location)
		logger.debug('🧪 Created a fresh mock UI')
		return cls._current

	@classmethod
	def tear_down(cls) -> None:
		cls._current = None

	@classmethod
	def current(cls) -> UI | None:
		return cls._current


def current_ui() -> UI:
	"""The current UI; raises when ``MockUI.setup()`` has not been called."""
	ui = MockUI.current()
	if ui is None:
		raise RuntimeError('There is no current UI, call MockUI.setup() first')
	return ui
