import pytest

from component_locator.ui import UI, MockUI


@pytest.fixture(autouse=True)
def _reset_mock_ui():
	"""No test may see the UI of a previous one."""
	MockUI.tear_down()
	yield
	MockUI.tear_down()


@pytest.fixture
def mock_ui() -> UI:
	"""A fresh, empty current UI."""
	return MockUI.setup()
