from component_locator.ui.adapter import ComponentTreeAdapter
from component_locator.ui.pretty import to_pretty_string, to_pretty_tree
from component_locator.ui.service import MockUI, current_ui
from component_locator.ui.views import (
	UI,
	Button,
	ComboBox,
	Component,
	Dialog,
	HasComponents,
	HorizontalLayout,
	InternalServerError,
	PasswordField,
	Text,
	TextField,
	VerticalLayout,
)

__all__ = [
	'UI',
	'Button',
	'ComboBox',
	'Component',
	'ComponentTreeAdapter',
	'Dialog',
	'HasComponents',
	'HorizontalLayout',
	'InternalServerError',
	'MockUI',
	'PasswordField',
	'Text',
	'TextField',
	'VerticalLayout',
	'current_ui',
	'to_pretty_string',
	'to_pretty_tree',
]
