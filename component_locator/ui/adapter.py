from collections.abc import Sequence
from typing import Any

from component_locator.locator.adapter import TreeAdapter
from component_locator.ui.pretty import to_pretty_string, to_pretty_tree
from component_locator.ui.service import MockUI
from component_locator.ui.views import Component, Dialog, InternalServerError


class ComponentTreeAdapter(TreeAdapter):
	"""Exposes the in-memory ``component_locator.ui`` tree to the locator."""

	def children(self, node: Component) -> Sequence[Component]:
		return node.children

	def is_visible(self, node: Component) -> bool:
		return node.visible

	def parent(self, node: Component) -> Component | None:
		return node.parent

	def id(self, node: Component) -> str | None:
		return node.id

	def caption(self, node: Component) -> str | None:
		return node.caption

	def placeholder(self, node: Component) -> str | None:
		return node.placeholder

	def text(self, node: Component) -> str:
		return node.text

	def style_classes(self, node: Component) -> set[str]:
		return node.style_names

	def current_root(self) -> Component | None:
		return MockUI.current()

	def location(self) -> str | None:
		ui = MockUI.current()
		return ui.location if ui is not None else None

	def describe(self, node: Component) -> str:
		return to_pretty_string(node)

	def describe_tree(self, node: Component) -> str:
		return to_pretty_tree(node)

	def is_unhandled_error(self, node: Any) -> bool:
		return isinstance(node, InternalServerError)

	def error_text(self, node: InternalServerError) -> str:
		return node.error_text

	def is_ephemeral_overlay(self, node: Any) -> bool:
		return isinstance(node, Dialog)

	def is_overlay_open(self, node: Dialog) -> bool:
		return node.opened

	def detach(self, node: Component) -> None:
		node.remove_from_parent()
