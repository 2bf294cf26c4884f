"""Visibility, stale dialog cleanup and internal server error detection."""

import pytest

from component_locator import (
	ComponentLocator,
	ComponentLookupError,
	InternalServerErrorDetected,
	NoComponentFoundError,
	expect_none,
	find_all,
	get_one,
)
from component_locator.ui import (
	Button,
	Dialog,
	HorizontalLayout,
	InternalServerError,
	MockUI,
	Text,
	VerticalLayout,
	current_ui,
)


class TestVisibility:
	def test_invisible_component_is_not_found(self):
		root = VerticalLayout(Button('hidden', visible=False), Button('shown'))
		assert [button.caption for button in find_all(Button, root=root)] == ['shown']

	def test_invisible_ancestor_hides_descendants(self):
		hidden_layout = HorizontalLayout(Button('inner'), visible=False)
		root = VerticalLayout(hidden_layout)
		assert find_all(Button, root=root) == []
		with pytest.raises(NoComponentFoundError):
			get_one(Button, root=root)
		expect_none(Button, root=root)

	def test_invisible_ancestor_above_the_search_root(self):
		button = Button('inner')
		inner = VerticalLayout(button)
		VerticalLayout(inner, visible=False)
		assert find_all(Button, root=inner) == []
		assert find_all(Button, root=button) == []

	def test_invisible_root_matches_nothing(self):
		root = VerticalLayout(Button(), visible=False)
		assert find_all(VerticalLayout, root=root) == []

	def test_making_visible_again(self):
		button = Button('b')
		layout = VerticalLayout(button, visible=False)
		expect_none(Button, root=layout)
		layout.visible = True
		assert get_one(Button, root=layout) is button

	def test_click_requires_visibility(self):
		button = Button('b')
		VerticalLayout(button, visible=False)
		with pytest.raises(RuntimeError):
			button.click()


class TestDialogCleanup:
	def test_closed_dialog_is_removed_before_lookup(self, mock_ui):
		dialog = Dialog(Button('Close'))
		dialog.open()
		assert dialog.parent is mock_ui
		assert get_one(Button, caption='Close') is dialog.children[0]

		dialog.close()
		# still attached until the next lookup
		assert dialog.parent is mock_ui
		expect_none(Button, caption='Close')
		assert dialog.parent is None
		assert mock_ui.component_count == 0

	def test_open_dialog_is_kept(self, mock_ui):
		dialog = Dialog(Text('Are you sure?'))
		dialog.open()
		assert get_one(Text).text == 'Are you sure?'
		assert dialog.parent is mock_ui

	def test_cleanup_only_looks_at_direct_children(self, mock_ui):
		nested = Dialog()
		layout = VerticalLayout(nested)
		stale = Dialog()
		mock_ui.add(layout)
		stale.open()
		stale.close()

		locator = ComponentLocator()
		assert locator.cleanup_overlays() == 1
		assert locator.cleanup_overlays() == 0
		assert stale.parent is None
		assert nested.parent is layout

	def test_cleanup_runs_when_searching_a_subtree(self, mock_ui):
		layout = VerticalLayout(Button('main'))
		mock_ui.add(layout)
		dialog = Dialog(Button('dialog'))
		dialog.open()
		dialog.close()
		find_all(Button, root=layout)
		assert dialog.parent is None

	def test_opening_without_ui_fails(self):
		with pytest.raises(RuntimeError):
			Dialog().open()


class TestInternalServerError:
	def test_error_component_aborts_lookup(self, mock_ui):
		mock_ui.add(VerticalLayout(Button('ok'), InternalServerError('NullPointerException: boom')))
		with pytest.raises(InternalServerErrorDetected) as error:
			get_one(Button)
		assert error.value.error_text == 'NullPointerException: boom'
		assert 'Error text: NullPointerException: boom' in str(error.value)
		assert "InternalServerError[text='NullPointerException: boom']" in str(error.value)
		assert not isinstance(error.value, ComponentLookupError)

	def test_hidden_error_component_still_aborts(self):
		root = VerticalLayout(InternalServerError('boom', visible=False))
		with pytest.raises(InternalServerErrorDetected):
			find_all(Button, root=root)

	def test_error_outside_the_searched_subtree_is_ignored(self, mock_ui):
		button = Button('ok')
		mock_ui.add(VerticalLayout(button), InternalServerError('boom'))
		assert get_one(Button, root=button.parent) is button


class TestTreeWiring:
	def test_style_name_checks_agree_with_styles_criterion(self):
		button = Button('Save', style_name='primary large')
		root = VerticalLayout(button, Button('Cancel', style_name='large'))
		assert button.has_style_name('large primary')
		assert not button.has_style_name('primary small')
		assert not button.has_style_name('')
		assert find_all(Button, root=root, styles='large primary') == [button]

	def test_removed_style_name_no_longer_matches(self):
		button = Button('Save', style_name='primary large')
		root = VerticalLayout(button)
		button.remove_style_name('primary')
		assert not button.has_style_name('primary')
		assert button.style_name == 'large'
		expect_none(Button, root=root, styles='primary')
		assert get_one(Button, root=root, styles='large') is button

	def test_remove_all_detaches_children(self):
		first, second = Button('1'), Text('2')
		root = VerticalLayout(first, second)
		root.remove_all()
		assert root.children == []
		assert root.component_count == 0
		assert first.parent is None and second.parent is None
		expect_none(Button, root=root)
		assert find_all(VerticalLayout, root=root) == [root]

	def test_component_ui(self, mock_ui):
		button = Button('ok')
		layout = HorizontalLayout(button)
		assert button.ui is None
		mock_ui.add(layout)
		assert button.ui is mock_ui
		assert mock_ui.ui is mock_ui
		layout.remove_from_parent()
		assert button.ui is None

	def test_current_ui(self):
		with pytest.raises(RuntimeError):
			current_ui()
		ui = MockUI.setup()
		assert current_ui() is ui
		MockUI.tear_down()
		with pytest.raises(RuntimeError):
			current_ui()
