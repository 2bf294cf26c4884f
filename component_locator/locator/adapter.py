from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any


class TreeAdapter(ABC):
	"""Capabilities the locator needs from a host UI component tree.

	The locator never touches nodes directly; everything goes through an adapter, so
	any retained component tree can be searched by implementing this class.
	"""

	def is_instance(self, node: Any, component_type: type) -> bool:
		return isinstance(node, component_type)

	@abstractmethod
	def children(self, node: Any) -> Sequence[Any]:
		"""Ordered children of ``node``; empty for leaves."""

	@abstractmethod
	def is_visible(self, node: Any) -> bool:
		"""The node's own visibility flag, ignoring its ancestors."""

	@abstractmethod
	def parent(self, node: Any) -> Any | None: ...

	@abstractmethod
	def id(self, node: Any) -> str | None: ...

	@abstractmethod
	def caption(self, node: Any) -> str | None: ...

	@abstractmethod
	def placeholder(self, node: Any) -> str | None: ...

	@abstractmethod
	def text(self, node: Any) -> str: ...

	@abstractmethod
	def style_classes(self, node: Any) -> set[str]: ...

	@abstractmethod
	def current_root(self) -> Any | None:
		"""Root searched by lookups that are not given one, or None when there is no UI."""

	def location(self) -> str | None:
		"""Current navigation path, used to prefix lookup failure messages."""
		return None

	@abstractmethod
	def describe(self, node: Any) -> str: ...

	@abstractmethod
	def describe_tree(self, node: Any) -> str: ...

	@abstractmethod
	def is_unhandled_error(self, node: Any) -> bool: ...

	@abstractmethod
	def error_text(self, node: Any) -> str: ...

	@abstractmethod
	def is_ephemeral_overlay(self, node: Any) -> bool:
		"""Overlays (dialogs, popups) which the host may leave attached after closing."""

	@abstractmethod
	def is_overlay_open(self, node: Any) -> bool: ...

	@abstractmethod
	def detach(self, node: Any) -> None: ...


_default_adapter: TreeAdapter | None = None


def set_default_adapter(adapter: TreeAdapter | None) -> None:
	"""Use ``adapter`` for lookups that don't pass one; None restores the built-in UI adapter."""
	global _default_adapter
	_default_adapter = adapter


def get_default_adapter() -> TreeAdapter:
	if _default_adapter is not None:
		return _default_adapter
	from component_locator.ui.adapter import ComponentTreeAdapter

	return ComponentTreeAdapter()
